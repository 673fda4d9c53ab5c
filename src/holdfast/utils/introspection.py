# holdfast:header:start
#
#   project      : Holdfast
#   file         : introspection.py
#   file_relpath : src/holdfast/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Runtime introspection helpers: describe a single class.

`describe_class` collects what a class declares *itself* (constructors,
fields, methods) into a `ClassSynopsis`, and `render_synopsis` prints it as a
compact, Java-like block:

```text
class holdfast.demo.counter.Counter(object) {
  // Constructors
  __init__(self, value: 'int') -> 'None';
  // Fields
  ...
  // Methods
  add(self, data: 'int') -> 'None';
}
```

`try_instantiate` then probes the two common construction shapes (no
arguments, one string argument) and reports each outcome without raising.

This is a single-class printer; members inherited from bases are not listed.
"""

from __future__ import annotations

import builtins
import importlib
import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from holdfast.config.logging import get_logger
from holdfast.core.errors import HoldfastError

if TYPE_CHECKING:
    from holdfast.config.logging import HoldfastLogger

logger: HoldfastLogger = get_logger(__name__)

CONSTRUCTOR_NAMES: tuple[str, ...] = ("__new__", "__init__")

# Bookkeeping attributes that `abc.ABCMeta` adds to every class it creates.
ABC_INTERNALS: tuple[str, ...] = ("_abc_impl",)


class ClassResolutionError(HoldfastError, LookupError):
    """A dotted name does not resolve to a class."""


def format_callable_pretty(obj: Any) -> str:
    """Return a human-friendly ``(module.qualname)`` for any callable.

    Handles functions, bound methods, callable instances, and partials. Falls
    back to the callable's class name when needed, and uses ``inspect.getmodule``
    as a last resort to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"(package.module.QualifiedName)"`` or ``"(QualifiedName)"``
        if the module cannot be resolved.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = inspect.getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"({mod_name}.{call_name})" if mod_name else f"({call_name})"


def type_name(cls: type) -> str:
    """Return ``module.QualName`` for ``cls``; builtins are shown bare."""
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_class(dotted_name: str) -> type:
    """Import and return the class named by ``dotted_name``.

    Accepts ``package.module.Class``, nested ``package.module.Outer.Inner``
    and bare builtin names such as ``str`` or ``dict``.

    Args:
        dotted_name (str): The name to resolve.

    Returns:
        type: The resolved class.

    Raises:
        ClassResolutionError: If no module prefix imports, an attribute is
            missing, or the result is not a class.
    """
    parts: list[str] = [p for p in dotted_name.strip().split(".") if p]
    if not parts:
        raise ClassResolutionError("Empty class name")

    obj: Any = None
    if len(parts) == 1:
        obj = getattr(builtins, parts[0], None)
    else:
        # Longest importable module prefix wins
        for split in range(len(parts) - 1, 0, -1):
            module_name: str = ".".join(parts[:split])
            try:
                obj = importlib.import_module(module_name)
            except ImportError:
                logger.trace("Not a module: %s", module_name)
                continue
            for attr in parts[split:]:
                obj = getattr(obj, attr, None)
                if obj is None:
                    break
            break

    if not isinstance(obj, type):
        raise ClassResolutionError(f"Cannot resolve class: {dotted_name}")
    logger.debug("Resolved %s to %r", dotted_name, obj)
    return obj


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """One declared member of a class.

    Attributes:
        name (str): Attribute name.
        kind (str): ``"constructor"``, ``"method"``, ``"classmethod"``,
            ``"staticmethod"``, ``"property"`` or ``"field"``.
        detail (str): Signature for callables, type for fields.
    """

    name: str
    kind: str
    detail: str

    def render(self) -> str:
        """Return the synopsis line (without indentation)."""
        if self.kind == "field":
            return f"{self.detail} {self.name};"
        if self.kind == "property":
            return f"@property {self.name}{self.detail};"
        prefix: str = f"@{self.kind} " if self.kind in ("classmethod", "staticmethod") else ""
        return f"{prefix}{self.name}{self.detail};"


@dataclass(frozen=True, slots=True)
class ClassSynopsis:
    """What a class declares itself, grouped for display.

    Attributes:
        name (str): Qualified class name.
        modifiers (tuple[str, ...]): E.g. ``("abstract",)``.
        bases (tuple[str, ...]): Qualified names of the direct bases.
        constructors (tuple[MemberInfo, ...]): ``__new__``/``__init__`` if declared.
        fields (tuple[MemberInfo, ...]): Class-level data, ``__slots__`` entries and
            annotated attributes.
        methods (tuple[MemberInfo, ...]): Declared routines and properties.
    """

    name: str
    modifiers: tuple[str, ...]
    bases: tuple[str, ...]
    constructors: tuple[MemberInfo, ...]
    fields: tuple[MemberInfo, ...]
    methods: tuple[MemberInfo, ...]


def _signature_text(func: Any) -> str:
    try:
        return str(inspect.signature(func))
    except (TypeError, ValueError):
        # Many builtins expose no signature metadata
        return "(...)"


def _annotation_text(annotation: Any) -> str:
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__name__", repr(annotation))


def _classify(name: str, raw: Any) -> MemberInfo | None:
    if name in ABC_INTERNALS:
        return None
    if isinstance(raw, classmethod):
        return MemberInfo(name, "classmethod", _signature_text(raw.__func__))
    if isinstance(raw, staticmethod):
        return MemberInfo(name, "staticmethod", _signature_text(raw.__func__))
    if isinstance(raw, property):
        returns: str = _signature_text(raw.fget).partition(" -> ")[2] if raw.fget else ""
        return MemberInfo(name, "property", f" -> {returns}" if returns else "")
    if inspect.isroutine(raw):
        return MemberInfo(name, "method", _signature_text(raw))
    if inspect.isdatadescriptor(raw) or inspect.ismethoddescriptor(raw):
        return None
    if name.startswith("__") and name.endswith("__"):
        return None
    return MemberInfo(name, "field", type(raw).__name__)


def describe_class(cls: type) -> ClassSynopsis:
    """Collect the members ``cls`` declares itself.

    Args:
        cls (type): The class to describe.

    Returns:
        ClassSynopsis: Constructors, fields and methods in declaration order
        (sorted by name for classes implemented in C).
    """
    namespace: dict[str, Any] = dict(vars(cls))
    annotations: dict[str, Any] = inspect.get_annotations(cls)

    constructors: list[MemberInfo] = []
    fields: list[MemberInfo] = []
    methods: list[MemberInfo] = []

    for name in CONSTRUCTOR_NAMES:
        if name in namespace:
            constructors.append(MemberInfo(name, "constructor", _signature_text(namespace[name])))

    for name, annotation in annotations.items():
        if name in namespace:
            continue
        fields.append(MemberInfo(name, "field", _annotation_text(annotation)))

    names: list[str] = list(namespace)
    if cls.__module__ == builtins.__name__:
        names.sort()
    for name in names:
        if name in CONSTRUCTOR_NAMES:
            continue
        if inspect.ismemberdescriptor(namespace[name]):
            # __slots__ entry: typed by its class annotation when there is one
            shown: str = _annotation_text(annotations[name]) if name in annotations else "slot"
            fields.append(MemberInfo(name, "field", shown))
            continue
        info: MemberInfo | None = _classify(name, namespace[name])
        if info is None:
            continue
        (fields if info.kind == "field" else methods).append(info)

    modifiers: tuple[str, ...] = ("abstract",) if inspect.isabstract(cls) else ()
    return ClassSynopsis(
        name=type_name(cls),
        modifiers=modifiers,
        bases=tuple(type_name(b) for b in cls.__bases__),
        constructors=tuple(constructors),
        fields=tuple(fields),
        methods=tuple(methods),
    )


def render_synopsis(synopsis: ClassSynopsis) -> list[str]:
    """Render a `ClassSynopsis` as display lines.

    Args:
        synopsis (ClassSynopsis): The synopsis to render.

    Returns:
        list[str]: Lines without trailing newlines.
    """
    head: str = " ".join((*synopsis.modifiers, "class", synopsis.name))
    if synopsis.bases:
        head += f"({', '.join(synopsis.bases)})"
    lines: list[str] = [f"{head} {{"]
    for title, members in (
        ("Constructors", synopsis.constructors),
        ("Fields", synopsis.fields),
        ("Methods", synopsis.methods),
    ):
        lines.append(f"  // {title}")
        lines.extend(f"  {m.render()}" for m in members)
    lines.append("}")
    return lines


@dataclass(frozen=True, slots=True)
class InstantiationAttempt:
    """Outcome of one construction attempt.

    Attributes:
        description (str): Which constructor shape was tried.
        ok (bool): Whether construction succeeded.
        text (str): ``str()`` of the new object, or the error summary.
    """

    description: str
    ok: bool
    text: str


INSTANTIATION_PROBES: tuple[tuple[str, tuple[object, ...]], ...] = (
    ("no arguments", ()),
    ("one string argument 'Test'", ("Test",)),
)


def try_instantiate(cls: type) -> list[InstantiationAttempt]:
    """Try each construction shape in `INSTANTIATION_PROBES`.

    Construction runs arbitrary user code, so any exception is captured and
    reported (with traceback at DEBUG) rather than propagated.

    Args:
        cls (type): The class to instantiate.

    Returns:
        list[InstantiationAttempt]: One entry per probe, in order.
    """
    attempts: list[InstantiationAttempt] = []
    for description, args in INSTANTIATION_PROBES:
        try:
            obj: object = cls(*args)
            attempts.append(InstantiationAttempt(description, True, str(obj)))
        except Exception as exc:  # noqa: BLE001 - reported to the user
            logger.debug(
                "Instantiating %s with %s failed", type_name(cls), description, exc_info=True
            )
            summary: str = f"{type(exc).__name__}: {exc}"
            attempts.append(InstantiationAttempt(description, False, summary))
    return attempts
