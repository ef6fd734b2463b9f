"""Registration of the built-in pattern examples.

Every example in the catalog is registered here under the name used on the
command line.
"""

from typing import Optional

from pattern_catalog.behavioral import (
    chain_of_responsibility,
    interpreter,
    iterator,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from pattern_catalog.creational import factory, singleton
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.example_registry import (
    ExampleRegistry,
    PatternFamily,
    get_example_registry,
)
from pattern_catalog.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

CREATIONAL = PatternFamily.CREATIONAL
STRUCTURAL = PatternFamily.STRUCTURAL
BEHAVIORAL = PatternFamily.BEHAVIORAL

# name, family, summary, demo taking the catalog configuration
BUILTIN_EXAMPLES = [
    ("singleton", CREATIONAL,
     "Eager, double-checked locking and lazy-value singletons",
     lambda config: singleton.demo()),
    ("factory", CREATIONAL,
     "Notification factory with a default channel fallback",
     lambda config: factory.demo(config.notification.default_channel)),
    ("adapter", STRUCTURAL,
     "Legacy payment processor behind a new gateway interface",
     lambda config: adapter.demo()),
    ("bridge", STRUCTURAL,
     "Abstractions and implementations varying independently",
     lambda config: bridge.demo()),
    ("composite", STRUCTURAL,
     "Files and folders printed as one tree",
     lambda config: composite.demo()),
    ("decorator", STRUCTURAL,
     "Coffee add-ons wrapping a base coffee",
     lambda config: decorator.demo()),
    ("facade", STRUCTURAL,
     "One call to place an order across four services",
     lambda config: facade.demo()),
    ("flyweight", STRUCTURAL,
     "Characters shared by symbol",
     lambda config: flyweight.demo()),
    ("proxy", STRUCTURAL,
     "Document loaded from disk on first display",
     lambda config: proxy.demo()),
    ("strategy", BEHAVIORAL,
     "Payment methods swapped at runtime",
     lambda config: strategy.demo()),
    ("state", BEHAVIORAL,
     "Session behaviour driven by login state",
     lambda config: state.demo()),
    ("observer", BEHAVIORAL,
     "Apps notified of stock price changes",
     lambda config: observer.demo()),
    ("chain-of-responsibility", BEHAVIORAL,
     "Loan requests passed along a chain of approvers",
     lambda config: chain_of_responsibility.demo(config.loan)),
    ("iterator", BEHAVIORAL,
     "Names walked through an explicit iterator",
     lambda config: iterator.demo()),
    ("template-method", BEHAVIORAL,
     "Fixed read, write, save flow with pluggable steps",
     lambda config: template_method.demo()),
    ("visitor", BEHAVIORAL,
     "Doctor and salesman visiting kids through double dispatch",
     lambda config: visitor.demo()),
    ("interpreter", BEHAVIORAL,
     "Addition and subtraction expression trees",
     lambda config: interpreter.demo()),
]


def register_builtin_examples(registry: Optional[ExampleRegistry] = None) -> ExampleRegistry:
    """Register every built-in example, skipping names already registered."""
    registry = registry or get_example_registry()
    logger = get_logger(__name__)

    for name, family, summary, demo in BUILTIN_EXAMPLES:
        if registry.is_registered(name):
            continue
        registry.register_example(name, family, summary, demo)

    logger.debug("Built-in examples registered", count=len(registry.get_registered_names()))
    return registry
