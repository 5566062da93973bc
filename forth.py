#!/usr/bin/env python3
"""
forth.py — Words, a dictionary and a data stack.

A tiny slice of Forth for puzzle solutions. Source text is tokenized
elsewhere; this module only knows how to run words against a stack.

Architecture:
  - Stack: a list of numbers, top at the end
  - Words: name -> word, names case-insensitive (stored upper-case)
  - Word kinds:
      BuiltinWord   native function over the stack
      ValueWord     pushes a literal
      CustomWord    runs a tuple of other words in order

Custom words hold the words themselves, not their names. Redefining a
name later leaves every custom word built before it untouched.
"""

import sys


class ForthError(Exception):
    pass


class UnknownWord(ForthError):
    def __init__(self, name):
        super().__init__(f'Unknown word: {name}')
        self.name = name


class StackUnderflow(ForthError):
    def __init__(self):
        super().__init__('Stack underflow')


class InvalidOperand(ForthError):
    pass


# ── Stack ─────────────────────────────────────────────────────────────────────

class Stack(list):
    def push(self, value):
        self.append(value)

    def pop(self, index=-1):
        if not self:
            raise StackUnderflow()
        return super().pop(index)

    def peek(self):
        if not self:
            raise StackUnderflow()
        return self[-1]

    def need(self, n: int):
        if len(self) < n:
            raise StackUnderflow()

    def __str__(self):
        return '<' + str(len(self)) + '> ' + ' '.join(str(x) for x in self)


# ── Words ─────────────────────────────────────────────────────────────────────

class Word:
    """Something that can be called against a stack."""

    def call(self, stack: Stack, words: 'Words'):
        raise NotImplementedError


class BuiltinWord(Word):
    def __init__(self, name: str, fn):
        self._name = name
        self._fn = fn

    @classmethod
    def wrap(cls, name: str, fn) -> Word:
        return cls(name, fn)

    @property
    def name(self) -> str:
        return self._name

    def call(self, stack, words):
        self._fn(stack)

    def __repr__(self):
        return f'BuiltinWord({self._name!r})'


class ValueWord(Word):
    """Pushes the same literal every time it's called."""

    def __init__(self, value):
        self._value = value

    @classmethod
    def wrap(cls, value) -> Word:
        return cls(value)

    @property
    def value(self):
        return self._value

    def call(self, stack, words):
        stack.push(self._value)

    def __repr__(self):
        return f'ValueWord({self._value!r})'


class CustomWord(Word):
    """
    A user-defined word: an alias for a sequence of existing words.

    The sequence is captured when the word is wrapped. Calling it runs each
    inner word in order and stops at the first one that raises; whatever
    the earlier words did to the stack stays done.
    """

    def __init__(self, inner_words):
        self._inner = tuple(inner_words)

    @classmethod
    def wrap(cls, inner_words) -> Word:
        return cls(inner_words)

    @property
    def inner_words(self) -> tuple:
        return self._inner

    def call(self, stack, words):
        for word in self._inner:
            word.call(stack, words)

    def __repr__(self):
        return f'CustomWord({list(self._inner)!r})'


# ── Dictionary ────────────────────────────────────────────────────────────────

class Words:
    def __init__(self):
        self._words: dict = {}
        self._order: list = []

    def define(self, name: str, word: Word):
        name = name.upper()
        self._words[name] = word
        if name not in self._order:
            self._order.append(name)

    def get(self, name: str) -> Word:
        word = self._words.get(name.upper())
        if word is None:
            raise UnknownWord(name)
        return word

    def resolve(self, items) -> list:
        """
        Turn tokens into words: names are looked up now, numbers become
        ValueWords, words pass through as they are.
        """
        resolved = []
        for item in items:
            if isinstance(item, Word):
                resolved.append(item)
            elif isinstance(item, str):
                resolved.append(self.get(item))
            else:
                resolved.append(ValueWord.wrap(item))
        return resolved

    def define_custom(self, name: str, items) -> Word:
        # Resolved before storing: a definition naming itself gets the old one.
        word = CustomWord.wrap(self.resolve(items))
        self.define(name, word)
        return word

    def names(self) -> list:
        return list(self._order)

    def see(self, name: str) -> str:
        upper = name.upper()
        word = self.get(name)
        if isinstance(word, CustomWord):
            parts = [f': {upper}']
            parts.extend(self._describe(w) for w in word.inner_words)
            parts.append(';')
            return ' '.join(parts)
        if isinstance(word, ValueWord):
            return f'{word.value} CONSTANT {upper}'
        return f': {upper} <builtin> ;'

    def _describe(self, word: Word) -> str:
        for name in self._order:
            if self._words[name] is word:
                return name
        # No longer reachable by name: show what was captured.
        if isinstance(word, ValueWord):
            return str(word.value)
        if isinstance(word, BuiltinWord):
            return word.name
        if isinstance(word, CustomWord):
            return ' '.join(['['] + [self._describe(w) for w in word.inner_words] + [']'])
        return repr(word)

    def __contains__(self, name):
        return isinstance(name, str) and name.upper() in self._words

    def __len__(self):
        return len(self._words)


# ── Built-ins ─────────────────────────────────────────────────────────────────

def _div(a, b):
    if b == 0:
        raise InvalidOperand('Division by zero')
    q = abs(a) // abs(b)  # truncate toward zero
    return q if (a < 0) == (b < 0) else -q


def add_builtin_words(words: Words):
    def _binop(fn):
        def run(stack):
            stack.need(2)
            b = stack[-1]; a = stack[-2]
            result = fn(a, b)
            del stack[-2:]
            stack.push(result)
        return run

    def w_dup(s):
        s.push(s.peek())
    def w_drop(s):
        s.pop()
    def w_swap(s):
        s.need(2); s[-1], s[-2] = s[-2], s[-1]
    def w_over(s):
        s.need(2); s.push(s[-2])

    builtins = {
        '+':    _binop(lambda a, b: a + b),
        '-':    _binop(lambda a, b: a - b),
        '*':    _binop(lambda a, b: a * b),
        '/':    _binop(_div),
        'DUP':  w_dup,
        'DROP': w_drop,
        'SWAP': w_swap,
        'OVER': w_over,
    }
    for name, fn in builtins.items():
        words.define(name, BuiltinWord.wrap(name, fn))


# ── Tests ─────────────────────────────────────────────────────────────────────

def _run_case(definitions, body):
    words = Words()
    add_builtin_words(words)
    for name, items in definitions:
        words.define_custom(name, items)
    stack = Stack()
    try:
        CustomWord.wrap(words.resolve(body)).call(stack, words)
    except ForthError as e:
        return list(stack), type(e).__name__
    return list(stack), None


def run_tests():
    cases = [
        # (definitions, body, expected stack, expected error)

        # Arithmetic
        ([], [1, 2, '+'],              [3],        None),
        ([], [10, 3, '-'],             [7],        None),
        ([], [6, 7, '*'],              [42],       None),
        ([], [20, 4, '/'],             [5],        None),
        ([], [-7, 2, '/'],             [-3],       None),   # toward zero
        ([], [1, 0, '/'],              [1, 0],     'InvalidOperand'),

        # Stack ops
        ([], [1, 2, '+', 'DUP'],       [3, 3],     None),
        ([], [3, 'DROP'],              [],         None),
        ([], [3, 4, 'SWAP'],           [4, 3],     None),
        ([], [1, 2, 'OVER'],           [1, 2, 1],  None),
        ([], ['DUP'],                  [],         'StackUnderflow'),
        ([], [1, '+'],                 [1],        'StackUnderflow'),

        # Case-insensitive names
        ([], [5, 'dup', 'Swap'],       [5, 5],     None),

        # User-defined words
        ([('SQUARE', ['DUP', '*'])],          [5, 'SQUARE'],   [25],  None),
        ([('SQUARE', ['DUP', '*']),
          ('FOURTH', ['SQUARE', 'SQUARE'])],  [3, 'FOURTH'],   [81],  None),
        ([('NOTHING', [])],                   [1, 'NOTHING'],  [1],   None),

        # Short-circuit on failure
        ([('BAD', [7, 'SWAP', 1])],           ['BAD'],         [7],   'StackUnderflow'),

        # Redefinition keeps earlier bindings
        ([('FOO', [5]), ('BAR', ['FOO']), ('FOO', [6])],
                                              ['FOO', 'BAR'],  [6, 5], None),
        ([('DUP', ['DUP', 'DUP'])],           [1, 'DUP'],      [1, 1, 1], None),
        ([('SWAP', ['DUP']), ('DUP', ['SWAP'])],
                                              [1, 'DUP'],      [1, 1], None),

        # Unknown word
        ([], ['NOPE'],                        [],              'UnknownWord'),
    ]

    passed = 0
    failures = []

    for definitions, body, expected, error in cases:
        label = ' '.join(str(x) for x in body)
        try:
            got = _run_case(definitions, body)
        except ForthError as e:
            # a definition that doesn't resolve
            got = ([], type(e).__name__)
        if got == (expected, error):
            passed += 1
        else:
            failures.append((label, repr((expected, error)), repr(got)))

    print(f'Tests: {passed}/{len(cases)} passed')
    for src, exp, got in failures:
        print(f'  FAIL: {src}')
        print(f'    exp: {exp}')
        print(f'    got: {got}')
    return passed, len(cases)


if __name__ == '__main__':
    p, t = run_tests()
    sys.exit(0 if p == t else 1)
