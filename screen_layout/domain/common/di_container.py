# screen_layout/domain/common/di_container.py

"""
Minimal dependency injection container used by the application wiring.
"""
from typing import Any, Callable, Dict, Set, Type, TypeVar

T = TypeVar('T')


class DIContainer:
    """Maps service interfaces to instances or factories."""

    def __init__(self):
        self._instance_registrations: Dict[type, Any] = {}
        self._factory_registrations: Dict[type, Callable[[], Any]] = {}
        self._resolving: Set[type] = set()  # guards against factory cycles

    def register_instance(self, base_type: Type[T], instance: T) -> None:
        """Return this instance whenever base_type is resolved."""
        self._instance_registrations[base_type] = instance

    def register_factory(self, base_type: Type[T], factory: Callable[[], T]) -> None:
        """Call factory on every resolution of base_type."""
        self._factory_registrations[base_type] = factory

    def is_registered(self, base_type: type) -> bool:
        return base_type in self._instance_registrations or base_type in self._factory_registrations

    def resolve(self, base_type: Type[T]) -> T:
        """
        Resolve a registered type.

        Instance registrations win over factories.

        Raises:
            ValueError: If the type is not registered or its factories form a cycle
        """
        if base_type in self._resolving:
            raise ValueError(f"Circular dependency detected while resolving {base_type.__name__}")

        if base_type in self._instance_registrations:
            return self._instance_registrations[base_type]

        if base_type in self._factory_registrations:
            self._resolving.add(base_type)
            try:
                return self._factory_registrations[base_type]()
            finally:
                self._resolving.remove(base_type)

        raise ValueError(f"No registration found for {base_type.__name__}")
