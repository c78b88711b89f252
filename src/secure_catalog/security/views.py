"""Restricted views over catalog objects.

One view class per capability tier rather than per catalog type:

* :class:`SecuredInfo` – transparent; carries the policy and its limits so
  data consumers can apply the read/write filters (``READ_WRITE`` + limits).
* :class:`ReadOnlyInfo` – writes never reach the wrapped object.
* :class:`MetadataInfo` – only descriptive metadata may be read.

Views report the wrapped type through ``__class__`` so ``isinstance`` checks
against catalog types keep working; ``type(view)`` is the view class.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from secure_catalog.catalog.model import CatalogInfo, Layer, LayerGroup, PublishedInfo, ResourceInfo, StoreInfo
from secure_catalog.kernel.security import AccessContext
from secure_catalog.security.policy import AccessLevel, Response, WrapperPolicy, unauthorized_access

T = TypeVar("T", bound=CatalogInfo)

#: Operations on a content handle that modify data.
WRITE_OPERATIONS: frozenset[str] = frozenset({
    "add_features",
    "modify_features",
    "remove_features",
    "set_features",
    "set_transaction",
    "create_schema",
    "update_schema",
    "remove_schema",
    "write",
    "update",
    "delete",
})

_OWN_SLOTS = frozenset({"_delegate", "_policy", "_context", "_overlay", "_links"})


class _GuardedList(list):
    """Copy of a list attribute whose mutators raise the view's access error."""

    __slots__ = ("_deny",)

    def __init__(self, items: list[Any], deny: Callable[[], Exception]) -> None:
        list.__init__(self, items)
        self._deny = deny

    def _refuse(self, *args: Any, **kwargs: Any) -> Any:
        raise self._deny()

    append = extend = insert = remove = pop = clear = sort = reverse = _refuse
    __setitem__ = __delitem__ = __iadd__ = __imul__ = _refuse


class _GuardedDict(dict):
    """Copy of a dict attribute whose mutators raise the view's access error."""

    __slots__ = ("_deny",)

    def __init__(self, items: dict[Any, Any], deny: Callable[[], Exception]) -> None:
        dict.__init__(self, items)
        self._deny = deny

    def _refuse(self, *args: Any, **kwargs: Any) -> Any:
        raise self._deny()

    pop = popitem = clear = update = setdefault = _refuse
    __setitem__ = __delitem__ = __ior__ = _refuse


def _guarded(value: list[Any] | dict[Any, Any], deny: Callable[[], Exception]) -> Any:
    if isinstance(value, list):
        return _GuardedList(value, deny)
    return _GuardedDict(value, deny)


class SecuredInfo(Generic[T]):
    """Transparent view of a catalog object bound to a :class:`WrapperPolicy`."""

    __slots__ = ("_delegate", "_policy", "_context", "_overlay", "_links")

    def __init__(self, delegate: T, policy: WrapperPolicy, context: AccessContext) -> None:
        if isinstance(delegate, SecuredInfo):
            delegate = delegate.unwrap()
        object.__setattr__(self, "_delegate", delegate)
        object.__setattr__(self, "_policy", policy)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_overlay", {})
        object.__setattr__(self, "_links", {})

    def _get_class(self) -> type:
        return type(self._delegate)

    __class__ = property(_get_class)  # type: ignore[assignment]

    @property
    def policy(self) -> WrapperPolicy:
        return self._policy

    @property
    def context(self) -> AccessContext:
        return self._context

    def unwrap(self) -> T:
        """The exact object this view wraps."""
        return self._delegate

    # ------------------------------------------------------------------
    # Attribute protocol
    # ------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name in _OWN_SLOTS:
            raise AttributeError(name)
        overlay = self._overlay
        if name in overlay:
            return overlay[name]
        if name in type(self._delegate).content_accessors:
            return self._content_accessor(name)
        value = getattr(self._delegate, name)
        if isinstance(value, (list, dict)):
            return self._container(name, value)
        if isinstance(value, (StoreInfo, ResourceInfo)) and not isinstance(value, SecuredInfo):
            links = self._links
            cached = links.get(name)
            if cached is None or cached.unwrap() is not value:
                cached = secure(value, self._policy, self._context)
                links[name] = cached
            return cached
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        self._write(name, value)

    def __delattr__(self, name: str) -> None:
        self._write(name, None, delete=True)

    def _write(self, name: str, value: Any, delete: bool = False) -> None:
        if delete:
            delattr(self._delegate, name)
        else:
            setattr(self._delegate, name, value)
        self._links.pop(name, None)

    def _content_accessor(self, name: str) -> Callable[..., Any]:
        return getattr(self._delegate, name)

    def _container(self, name: str, value: list[Any] | dict[Any, Any]) -> Any:
        return value

    def _deny(self) -> Exception:
        return unauthorized_access(self._context, self._delegate.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._delegate!r}, level={self._policy.level.value})"


class ReadOnlyInfo(SecuredInfo[T]):
    """``READ_ONLY`` tier.

    With a ``HIDE`` response attribute writes land in a view-local overlay,
    list and dict attributes are read as view-local copies and content
    handles lack their write operations. With ``CHALLENGE`` every one of
    those writes raises the unauthorized-access error.
    """

    __slots__ = ()

    def _write(self, name: str, value: Any, delete: bool = False) -> None:
        if self._policy.response is Response.CHALLENGE:
            raise self._deny()
        if delete:
            self._overlay.pop(name, None)
        else:
            self._overlay[name] = value
        self._links.pop(name, None)

    def _container(self, name: str, value: list[Any] | dict[Any, Any]) -> Any:
        if self._policy.response is Response.CHALLENGE:
            return _guarded(value, self._deny)
        copied = list(value) if isinstance(value, list) else dict(value)
        self._overlay[name] = copied
        return copied

    def _content_accessor(self, name: str) -> Callable[..., Any]:
        accessor = getattr(self._delegate, name)

        def read_only(*args: Any, **kwargs: Any) -> Any:
            handle = accessor(*args, **kwargs)
            if handle is None:
                return None
            return ReadOnlyContent(handle, self._policy, self._context, self._delegate.name)

        return read_only


class MetadataInfo(SecuredInfo[T]):
    """``METADATA`` tier: writes, container mutation and data access raise."""

    __slots__ = ()

    def _write(self, name: str, value: Any, delete: bool = False) -> None:
        raise self._deny()

    def _container(self, name: str, value: list[Any] | dict[Any, Any]) -> Any:
        return _guarded(value, self._deny)

    def _content_accessor(self, name: str) -> Callable[..., Any]:
        def denied(*args: Any, **kwargs: Any) -> Any:
            raise self._deny()

        return denied


class SecuredLayerGroup(SecuredInfo[LayerGroup]):
    """Layer group exposing already-decorated members.

    ``layers``, ``styles`` and ``root_layer`` are view-local; any other
    attribute behaves as on the wrapped group.
    """

    __slots__ = ()

    _MEMBER_ATTRS = frozenset({"layers", "styles", "root_layer"})

    def __init__(
        self,
        delegate: LayerGroup,
        policy: WrapperPolicy,
        context: AccessContext,
        layers: list[PublishedInfo],
        styles: list[Any],
        root_layer: Layer | None,
    ) -> None:
        SecuredInfo.__init__(self, delegate, policy, context)
        self._overlay.update(layers=layers, styles=styles, root_layer=root_layer)

    def _write(self, name: str, value: Any, delete: bool = False) -> None:
        if name in self._MEMBER_ATTRS:
            self._overlay[name] = None if delete else value
            return
        SecuredInfo._write(self, name, value, delete)


class ReadOnlyContent:
    """Read-only proxy over a data handle (feature source, coverage reader...)."""

    __slots__ = ("_handle", "_policy", "_context", "_resource_name")

    def __init__(self, handle: Any, policy: WrapperPolicy, context: AccessContext, resource_name: str) -> None:
        object.__setattr__(self, "_handle", handle)
        object.__setattr__(self, "_policy", policy)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_resource_name", resource_name)

    def unwrap(self) -> Any:
        return self._handle

    def __getattr__(self, name: str) -> Any:
        if name in ("_handle", "_policy", "_context", "_resource_name"):
            raise AttributeError(name)
        if name in WRITE_OPERATIONS:
            self._refuse(name)
        return getattr(self._handle, name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._refuse(name)

    def _refuse(self, name: str) -> None:
        if self._policy.response is Response.CHALLENGE:
            raise unauthorized_access(self._context, self._resource_name)
        raise AttributeError(f"'{name}' is not available on read-only data of {self._resource_name}")

    def __repr__(self) -> str:
        return f"ReadOnlyContent({self._handle!r})"


_TIERS: dict[AccessLevel, type[SecuredInfo[Any]]] = {
    AccessLevel.METADATA: MetadataInfo,
    AccessLevel.READ_ONLY: ReadOnlyInfo,
    AccessLevel.READ_WRITE: SecuredInfo,
}


def secure(obj: T, policy: WrapperPolicy, context: AccessContext) -> T:
    """Wrap *obj* in the view matching ``policy.level``.

    ``HIDDEN`` objects have no view; callers must drop them instead.
    """
    tier = _TIERS.get(policy.level)
    if tier is None:
        raise ValueError(f"No view exists for {policy.level.value} objects")
    return tier(obj, policy, context)  # type: ignore[return-value]


__all__ = [
    "WRITE_OPERATIONS",
    "MetadataInfo",
    "ReadOnlyContent",
    "ReadOnlyInfo",
    "SecuredInfo",
    "SecuredLayerGroup",
    "secure",
]
