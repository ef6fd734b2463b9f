"""Structural patterns: Adapter, Bridge, Composite, Decorator, Facade, Flyweight and Proxy."""
