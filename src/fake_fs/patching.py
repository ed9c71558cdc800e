"""API substitution — route an existing filesystem facade through a FakeFs.

Code under test usually reaches the filesystem through some namespace:
a module, a service object, an adapter.  ``Patcher`` swaps that
namespace's functions for the fake filesystem's bound methods and puts
the originals back afterwards:

1. ``patch()`` records what the target currently holds for each name
   (including "nothing") and binds the engine's method in its place.
2. ``unpatch()`` restores exactly the recorded state.

The engine itself knows nothing about this; it only publishes its
:meth:`~fake_fs.fs.FakeFs.method_table`.

Example::

    with patched(fs, storage_module, names=["read_file", "exists"]):
        run_code_under_test()
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from types import MemberDescriptorType, TracebackType
from typing import TYPE_CHECKING, Any

from fake_fs.logging import LogLevel

if TYPE_CHECKING:
    from fake_fs.fs import FakeFs

_MISSING = object()


def _own_attribute(target: object, name: str) -> Any:
    """Return what *target* itself holds for *name*, or ``_MISSING``.

    Inherited attributes count as missing: restoring them would copy a
    class attribute onto the target instead of removing the override.
    Values stored in ``__slots__`` belong to the instance.
    """
    namespace = getattr(target, "__dict__", {})
    if name in namespace:
        return namespace[name]
    slot = inspect.getattr_static(type(target), name, None)
    if isinstance(slot, MemberDescriptorType):
        return getattr(target, name, _MISSING)
    return _MISSING


class Patcher:
    """Bind a fake filesystem's operations onto a target namespace."""

    def __init__(self, fs: FakeFs, target: object, names: Iterable[str] | None = None) -> None:
        """Prepare to patch *target* with *fs*'s methods.

        Args:
            fs: The filesystem whose methods will be bound.
            target: Any object with settable attributes (module, instance).
            names: Which operations to bind (default: all of them).

        Raises:
            KeyError: If a name is not one of the filesystem's operations.

        """
        table = fs.method_table()
        selected = list(names) if names is not None else list(table)
        unknown = [name for name in selected if name not in table]
        if unknown:
            msg = f"Unknown filesystem operations: {', '.join(unknown)}"
            raise KeyError(msg)
        self._fs = fs
        self._target = target
        self._methods = {name: table[name] for name in selected}
        self._originals: dict[str, Any] | None = None

    @property
    def active(self) -> bool:
        """Return True while the target is patched."""
        return self._originals is not None

    def patch(self) -> None:
        """Record the target's originals and bind the fake methods.

        If binding any name fails, the names already bound are restored
        and the target is left as it was.

        Raises:
            RuntimeError: If already patched.
            AttributeError: If the target refuses one of the names.

        """
        if self._originals is not None:
            msg = "Target is already patched"
            raise RuntimeError(msg)
        originals = {name: _own_attribute(self._target, name) for name in self._methods}
        bound: dict[str, Any] = {}
        try:
            for name, method in self._methods.items():
                setattr(self._target, name, method)
                bound[name] = originals[name]
        except (AttributeError, TypeError):
            self._restore(bound)
            raise
        self._originals = originals
        self._fs.logger.log(
            LogLevel.INFO,
            f"patched {len(self._methods)} operations onto {self._target!r}",
            source="patch",
        )

    def unpatch(self) -> None:
        """Restore the target to its state before ``patch()``.

        Does nothing if the target is not patched.
        """
        if self._originals is None:
            return
        self._restore(self._originals)
        self._originals = None
        self._fs.logger.log(LogLevel.INFO, f"restored {self._target!r}", source="patch")

    def _restore(self, originals: dict[str, Any]) -> None:
        for name, original in originals.items():
            if original is _MISSING:
                delattr(self._target, name)
            else:
                setattr(self._target, name, original)

    def __enter__(self) -> Patcher:
        """Patch on entering a ``with`` block."""
        self.patch()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Restore on leaving a ``with`` block, even after an error."""
        self.unpatch()


@contextmanager
def patched(fs: FakeFs, target: object, names: Iterable[str] | None = None) -> Iterator[FakeFs]:
    """Patch *target* with *fs* for the duration of a ``with`` block."""
    with Patcher(fs, target, names):
        yield fs
