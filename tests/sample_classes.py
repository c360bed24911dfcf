"""Classes the test-suite patches. Imported as ``tests.sample_classes``."""

from __future__ import annotations

import functools


class Greeter:
    def greet(self, name):
        return "Hello, " + name

    def shout(self, name):
        return self.greet(name).upper()


class PoliteGreeter(Greeter):
    pass


class RudeGreeter(Greeter):
    def greet(self, name):
        return "What do you want, " + name


class Base:
    def hello(self):
        return "base hello"


class Child(Base):
    pass


class Descriptors:
    prefix = "made"

    @classmethod
    def create(cls, label):
        return f"{cls.prefix}:{cls.__name__}:{label}"

    @staticmethod
    def add(a, b):
        return a + b


class SubDescriptors(Descriptors):
    prefix = "sub"


def _add(a, b):
    return a + b


class Adder:
    def __init__(self, amount):
        self.amount = amount

    def __call__(self, value):
        return value + self.amount


class Calculator:
    plus_one = functools.partial(_add, 1)
    plus_two = Adder(2)


class Slotted:
    __slots__ = ("value",)

    def __init__(self):
        self.value = 1

    def get(self):
        return self.value


class Post:
    def __init__(self, body=""):
        self.body = body


class Outer:
    class Inner:
        def ping(self):
            return "pong"


def make_greeter():
    return Greeter()


def shout_twice(self, text):
    return f"{text.upper()} {text.upper()}"
