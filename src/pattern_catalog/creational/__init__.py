"""Creational patterns: Singleton and Factory Method."""
