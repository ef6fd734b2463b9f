"""Design Pattern Catalog.

A collection of classic object-oriented design patterns, each a small,
self-contained example that prints its output to the console.

Key Components:
    - creational: Singleton variants and Factory Method
    - structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
    - behavioral: Strategy, State, Observer, Chain of Responsibility, Iterator,
      Template Method, Visitor, Interpreter
    - infrastructure: logging, singleton support and the example registry
    - config: configuration schemas and loading
    - cli: command line for listing and running the examples

Usage:
    >>> pattern-catalog list
    >>> pattern-catalog run decorator
    >>> python -m pattern_catalog.structural.composite
"""

__version__ = "1.0.0"
