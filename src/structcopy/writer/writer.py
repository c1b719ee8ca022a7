"""Copy engine: field-by-field copying between instances of a common type.

Usage:
    writer = ObjectWriter()
    writer.copy_to(source, destination, Handshake)

    # Transform values in flight
    negate = ObjectWriter(
        transfer=transform_values(lambda v: -v if isinstance(v, int) else v)
    )

Copy Semantics:
    - The declared type is copied first, public fields included.
    - Each ancestor in the declared type's MRO is then copied without its
      public fields, stopping before `object`.
    - Static (ClassVar) fields are never copied.
    - Values are copied shallowly unless another transfer strategy is used.
    - A failure aborts the copy; fields already written stay written.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog

from structcopy.cache import AccessorCache, get_accessor_cache
from structcopy.config import WriterSettings
from structcopy.core.accessor import BoundAccessor
from structcopy.core.transfer import TransferFunction
from structcopy.errors import CopyError, IntrospectionError

T = TypeVar("T")
U = TypeVar("U")

logger = structlog.get_logger()


class ObjectWriter:
    """Copies every applicable field of one object to another.

    Customize per-field behaviour either by injecting a transfer function or
    by overriding `transform_field` in a subclass.

    Args:
        cache: Accessor cache (default: the process-wide cache).
        transfer: Single-field transfer strategy (default: from settings).
        settings: Writer configuration (default: loaded from environment).
    """

    def __init__(
        self,
        cache: AccessorCache | None = None,
        transfer: TransferFunction | None = None,
        settings: WriterSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else WriterSettings()
        self._cache = cache if cache is not None else get_accessor_cache()
        self._transfer = (
            transfer if transfer is not None else self._settings.default_transfer.get_strategy()
        )

    @property
    def cache(self) -> AccessorCache:
        """Return the accessor cache used by this writer."""
        return self._cache

    @property
    def settings(self) -> WriterSettings:
        """Return the writer configuration."""
        return self._settings

    def copy_to(self, source: Any, destination: Any, common_type: type) -> None:
        """Copy every field of `source` into `destination`.

        Args:
            source: Object to read fields from.
            destination: Object to write fields to.
            common_type: Type containing each field to copy.

        Raises:
            IntrospectionError: If `common_type` is not a class, or its fields
                cannot be introspected.
            CopyError: If a field read or write fails. Names the type being
                copied when the failure occurred.
        """
        if not isinstance(common_type, type):
            raise IntrospectionError(f"Expected a class, got {type(common_type).__name__}")
        # Public fields are only copied the first time around
        self._copy_to_internal(
            source, destination, common_type.__mro__, 0, self._settings.copy_public_fields
        )

    def clone(self, source: T, common_type: type | None = None) -> T:
        """Create an uninitialised instance of `source`'s type and copy into it.

        `__init__` is not called on the clone.

        Args:
            source: Object to clone.
            common_type: Type whose fields are copied (default: type of source).

        Returns:
            New instance holding the copied fields.
        """
        cls = type(source)
        instance = cls.__new__(cls)
        self.copy_to(source, instance, common_type if common_type is not None else cls)
        return instance

    def transform_field(
        self, modifier_source: BoundAccessor, modifier_dest: BoundAccessor, field_index: int
    ) -> None:
        """Called for every non-static field that will be copied.

        Args:
            modifier_source: Accessor bound to the original object.
            modifier_dest: Accessor bound to the object being written.
            field_index: The current field index.
        """
        self._transfer(modifier_source, modifier_dest, field_index)

    def _copy_to_internal(
        self,
        source: Any,
        destination: Any,
        lineage: tuple[type, ...],
        depth: int,
        copy_public: bool,
    ) -> None:
        """Copy one level of the lineage, then recurse into the next ancestor."""
        common_type = lineage[depth]
        accessors = self._cache.resolve(common_type)

        modifier_source = accessors.with_target(source)
        modifier_dest = accessors.with_target(destination)
        skip_unset = self._settings.skip_unset_fields

        try:
            for index in range(modifier_source.size()):
                spec = modifier_source.get_field(index)
                if spec.is_static or (spec.is_public and not copy_public):
                    continue
                if skip_unset and not modifier_source.is_set(index):
                    continue
                self.transform_field(modifier_source, modifier_dest, index)
        except Exception as e:
            logger.debug("copy failed", type=common_type.__qualname__, error=repr(e))
            raise CopyError(common_type) from e

        # Copy non-public fields underneath
        ancestor = depth + 1
        if ancestor < len(lineage) and lineage[ancestor] is not object:
            self._copy_to_internal(source, destination, lineage, ancestor, False)


_writer: ObjectWriter | None = None


def get_writer() -> ObjectWriter:
    """Access the default writer, creating it on first use.

    Returns:
        Process-wide ObjectWriter backed by the global accessor cache.
    """
    global _writer
    if _writer is None:
        _writer = ObjectWriter()
    return _writer


def copy_to(source: Any, destination: Any, common_type: type) -> None:
    """Copy fields using the default writer. See ObjectWriter.copy_to."""
    get_writer().copy_to(source, destination, common_type)


def clone(source: U, common_type: type | None = None) -> U:
    """Clone using the default writer. See ObjectWriter.clone."""
    return get_writer().clone(source, common_type)
