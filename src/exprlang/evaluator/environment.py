"""
Lexical environment for expression evaluation.

Environments form a parent chain of small binding segments. Extending one
allocates a new child segment and never touches the parent, so closures that
captured an ancestor keep seeing exactly the bindings they captured.
"""

import logging
from typing import Any, Dict, Iterator, Mapping, Optional

logger = logging.getLogger(__name__)

class Environment:
    """
    Immutable mapping from variable names to runtime values, with shadowing.

    Lookup walks from the innermost segment outwards; the first segment that
    binds the name wins. There is no define or set operation.
    """

    def __init__(
        self,
        bindings: Optional[Mapping[str, Any]] = None,
        parent: Optional['Environment'] = None
    ):
        """
        Initializes a new Environment segment.

        Args:
            bindings: Optional initial bindings for this segment. The mapping is
                      copied, so later changes to it are not visible here.
            parent: Optional enclosing environment. None means top-level.
        """
        self._bindings: Dict[str, Any] = dict(bindings) if bindings is not None else {}
        self._parent: Optional['Environment'] = parent

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'Environment':
        """
        Builds a top-level environment, e.g. the embedder's predefined names.

        Raises:
            TypeError: If a bound value is not a number, a boolean or a Closure.
        """
        from .values import is_boolean, is_closure, is_number

        for name, value in mapping.items():
            if not (is_number(value) or is_boolean(value) or is_closure(value)):
                raise TypeError(
                    f"Cannot bind '{name}': expected a number, boolean or Closure, got {type(value).__name__}"
                )
        logger.debug(f"Creating initial environment with names: {sorted(mapping.keys())}")
        return cls(bindings=mapping)

    @property
    def parent(self) -> Optional['Environment']:
        return self._parent

    @property
    def depth(self) -> int:
        """Number of segments in the chain, including this one."""
        count = 0
        env: Optional[Environment] = self
        while env is not None:
            count += 1
            env = env._parent
        return count

    def _segments(self) -> Iterator['Environment']:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env._parent

    def lookup(self, name: str) -> Any:
        """
        Looks up a variable name in this environment and its ancestors.

        Returns:
            The value bound by the innermost segment that binds the name.

        Raises:
            NameError: If no segment binds the name. The evaluator reports this
                       as UnboundVariableError.
        """
        for env in self._segments():
            if name in env._bindings:
                return env._bindings[name]
        raise NameError(f"Unbound variable: Name '{name}' is not defined.")

    def __contains__(self, name: object) -> bool:
        return any(name in env._bindings for env in self._segments())

    def extend(self, name: str, value: Any) -> 'Environment':
        """
        Creates a child environment binding ``name`` to ``value``.

        The binding shadows any binding of the same name further out. This
        environment is left unchanged.
        """
        return Environment(bindings={name: value}, parent=self)

    def extend_many(self, bindings: Mapping[str, Any]) -> 'Environment':
        """Creates a child environment holding all of ``bindings`` in one segment."""
        return Environment(bindings=bindings, parent=self)

    def to_dict(self) -> Dict[str, Any]:
        """Returns the effective bindings as a flat dict (innermost binding wins)."""
        flattened: Dict[str, Any] = {}
        for env in reversed(list(self._segments())):
            flattened.update(env._bindings)
        return flattened

    def get_local_bindings(self) -> Dict[str, Any]:
        """Returns a copy of the bindings defined directly in this segment."""
        return self._bindings.copy()

    def __repr__(self) -> str:
        parent_id = id(self._parent) if self._parent else None
        return f"<Environment id={id(self)} parent={parent_id} bindings={list(self._bindings.keys())}>"
