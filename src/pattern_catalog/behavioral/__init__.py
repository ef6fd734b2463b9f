"""Behavioral patterns: Strategy, State, Observer, Chain of Responsibility, Iterator, Template Method, Visitor and Interpreter."""
