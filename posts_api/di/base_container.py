# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')

ContainerKey = Union[Type, str]


class BaseContainer:
    """Base dependency injection container: singletons and factories keyed by type or name"""
    
    def __init__(self) -> None:
        self.instances: Dict[ContainerKey, Any] = {}
        self.factories: Dict[ContainerKey, Callable[[], Any]] = {}
    
    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance
    
    def register_factory(self, interface: Union[Type[TypeVarType], str], factory: Callable[[], TypeVarType]) -> None:
        """Register a factory; it runs on every lookup"""
        self.factories[interface] = factory
    
    def has(self, interface: ContainerKey) -> bool:
        return interface in self.instances or interface in self.factories
    
    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]
        
        if interface in self.factories:
            return self.factories[interface]()
        
        raise ValueError(f"No registration found for {interface}")
