"""
Core type representation for code generation.

Infers a language-neutral type tree from a JSON value and flattens the
object types it contains into the order generators emit them in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from ...logging_config import get_logger
from .naming import NamingCase, convert_key

logger = get_logger(__name__)

T = TypeVar("T")


class NodeKind(Enum):
    """Kind of an inferred type node."""

    PRIMITIVE = "primitive"
    ARRAY = "array"
    OBJECT = "object"


class PrimitiveTag(Enum):
    """JSON scalar categories, plus the placeholder for empty arrays."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ANY = "any"  # Element type of an empty array


@dataclass(frozen=True)
class Field:
    """A single object member: the JSON key exactly as written and its type."""

    original_name: str
    node: "TypeNode"


@dataclass(frozen=True)
class TypeNode:
    """
    Immutable description of one JSON-derived type.

    Object nodes carry their fields in JSON key order, array nodes carry the
    type of their first element and primitive nodes carry a scalar tag.
    """

    name: str
    kind: NodeKind
    primitive: Optional[PrimitiveTag] = None
    element: Optional["TypeNode"] = None
    fields: Tuple[Field, ...] = field(default_factory=tuple)

    @property
    def is_primitive(self) -> bool:
        return self.kind == NodeKind.PRIMITIVE

    @property
    def is_array(self) -> bool:
        return self.kind == NodeKind.ARRAY

    @property
    def is_object(self) -> bool:
        return self.kind == NodeKind.OBJECT

    def get_field(self, original_name: str) -> Optional["TypeNode"]:
        """Get the type of a field by its JSON key."""
        for member in self.fields:
            if member.original_name == original_name:
                return member.node
        return None

    def signature(self) -> str:
        """Structural fingerprint, used to tell same-named shapes apart."""
        if self.is_primitive:
            return self.primitive.value
        if self.is_array:
            return f"[{self.element.signature()}]"
        members = ",".join(
            f"{member.original_name}:{member.node.signature()}" for member in self.fields
        )
        return f"{{{members}}}"


def primitive(tag: PrimitiveTag) -> TypeNode:
    """Build a primitive node; primitives are named after their tag."""
    return TypeNode(name=tag.value, kind=NodeKind.PRIMITIVE, primitive=tag)


def _type_name(key: str) -> str:
    return convert_key(key, NamingCase.PASCAL_CASE, fallback="Object")


def infer_type(value: Any, name: str) -> TypeNode:
    """
    Infer the type tree of a JSON value.

    Args:
        value: Parsed JSON value (dict, list, str, int, float, bool or None)
        name: Name given to the node when it is an object or array

    Returns:
        Root TypeNode of the inferred tree
    """
    if value is None:
        return primitive(PrimitiveTag.NULL)

    # bool before numbers: True is an int in Python
    if isinstance(value, bool):
        return primitive(PrimitiveTag.BOOLEAN)

    if isinstance(value, (int, float)):
        return primitive(PrimitiveTag.NUMBER)

    if isinstance(value, str):
        return primitive(PrimitiveTag.STRING)

    if isinstance(value, (list, tuple)):
        if value:
            element = infer_type(value[0], f"{name}Item")
        else:
            element = primitive(PrimitiveTag.ANY)
        return TypeNode(name=name, kind=NodeKind.ARRAY, element=element)

    if isinstance(value, dict):
        members = tuple(
            Field(original_name=str(key), node=infer_type(child, _type_name(str(key))))
            for key, child in value.items()
        )
        return TypeNode(name=name, kind=NodeKind.OBJECT, fields=members)

    logger.debug("Non-JSON value of type %s inferred as any", type(value).__name__)
    return primitive(PrimitiveTag.ANY)


def _innermost(node: TypeNode) -> TypeNode:
    """Unwrap nested arrays down to their element type."""
    while node.is_array and node.element is not None:
        node = node.element
    return node


def _collect_child_types(node: TypeNode) -> List[TypeNode]:
    """Collect object types below node, children before parents."""
    collected: List[TypeNode] = []
    if not node.is_object:
        return collected

    for member in node.fields:
        child = _innermost(member.node)
        if child.is_object:
            collected.extend(_collect_child_types(child))
            collected.append(child)

    return collected


def collect_nested_types(root: TypeNode) -> List[TypeNode]:
    """
    Collect every object type nested below root, depth-first.

    The root itself is not included. A root array contributes the object
    types reachable through its elements.

    Returns:
        Object nodes in emission order (may contain repeated names)
    """
    if root.is_array:
        element = _innermost(root)
        if element.is_object:
            return _collect_child_types(element) + [element]
        return []
    return _collect_child_types(root)


def unique_types(root: TypeNode) -> List[TypeNode]:
    """
    Flatten the tree into the ordered list of types to emit.

    Nested types come first, the root last; later nodes whose name was
    already seen are dropped.
    """
    seen = set()
    ordered = []
    for node in collect_nested_types(root) + [root]:
        if node.name in seen:
            continue
        seen.add(node.name)
        ordered.append(node)

    logger.debug(
        "Flattened %s into %d type(s): %s",
        root.name,
        len(ordered),
        [node.name for node in ordered],
    )
    return ordered


def generate_with_nested_types(root: TypeNode, emit: Callable[[TypeNode], T]) -> List[T]:
    """
    Apply emit to every distinct type of the tree in emission order.

    Args:
        root: Root of the inferred tree
        emit: Callback rendering one node

    Returns:
        List of emit results, one per distinct type name
    """
    return [emit(node) for node in unique_types(root)]


def find_name_collisions(root: TypeNode) -> Dict[str, List[str]]:
    """
    Find object type names shared by differently shaped objects.

    Only the first shape of each name is emitted; this reports the rest.

    Returns:
        Mapping of colliding name to the distinct signatures seen, in order
    """
    shapes: Dict[str, List[str]] = {}
    for node in collect_nested_types(root) + [root]:
        if not node.is_object:
            continue
        signatures = shapes.setdefault(node.name, [])
        signature = node.signature()
        if signature not in signatures:
            signatures.append(signature)

    collisions = {name: sigs for name, sigs in shapes.items() if len(sigs) > 1}
    for name, signatures in collisions.items():
        logger.warning(
            "Type name %s is shared by %d different shapes; only the first is emitted",
            name,
            len(signatures),
        )
    return collisions
