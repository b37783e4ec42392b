"""Creating sequential and partitioned datasets."""

from __future__ import annotations

from typing import Any, Mapping

from ..core import ClientCore, Endpoint

# JSON keys of the request body, in the order the server documents them.
_BODY_KEYS = (
    "volser",
    "unit",
    "dsorg",
    "alcunit",
    "primary",
    "secondary",
    "dirblk",
    "avgblk",
    "recfm",
    "blksize",
    "lrecl",
    "storclass",
    "mgntclass",
    "dataclass",
    "dsntype",
    "like",
)


class DatasetCreateBuilder(Endpoint):
    """Builds a request that allocates a new dataset."""

    method = "POST"

    def __init__(self, core: ClientCore, dataset: Any) -> None:
        self.core = core
        self._dataset = str(dataset)
        self._attributes: dict[str, Any] = {}

    def _set(self, key: str, value: Any) -> "DatasetCreateBuilder":
        return self._replace(_attributes={**self._attributes, key: value})

    def volume(self, value: Any) -> "DatasetCreateBuilder":
        """Volume serial to allocate the dataset on."""
        return self._set("volser", str(value))

    def device_type(self, value: Any) -> "DatasetCreateBuilder":
        """Device type, such as 3390."""
        return self._set("unit", str(value))

    def organization(self, value: Any) -> "DatasetCreateBuilder":
        """Dataset organization, such as PS or PO."""
        return self._set("dsorg", str(value))

    def space_allocation_unit(self, value: Any) -> "DatasetCreateBuilder":
        """Unit of space allocation, such as TRK or CYL."""
        return self._set("alcunit", str(value))

    def primary_space(self, value: int) -> "DatasetCreateBuilder":
        """Primary space allocation."""
        return self._set("primary", int(value))

    def secondary_space(self, value: int) -> "DatasetCreateBuilder":
        """Secondary space allocation."""
        return self._set("secondary", int(value))

    def directory_blocks(self, value: int) -> "DatasetCreateBuilder":
        """Number of directory blocks of a partitioned dataset."""
        return self._set("dirblk", int(value))

    def average_block_size(self, value: int) -> "DatasetCreateBuilder":
        """Average block size."""
        return self._set("avgblk", int(value))

    def record_format(self, value: Any) -> "DatasetCreateBuilder":
        """Record format, such as FB."""
        return self._set("recfm", str(value))

    def block_size(self, value: int) -> "DatasetCreateBuilder":
        """Block size."""
        return self._set("blksize", int(value))

    def record_length(self, value: int) -> "DatasetCreateBuilder":
        """Logical record length."""
        return self._set("lrecl", int(value))

    def storage_class(self, value: Any) -> "DatasetCreateBuilder":
        """SMS storage class."""
        return self._set("storclass", str(value))

    def management_class(self, value: Any) -> "DatasetCreateBuilder":
        """SMS management class."""
        return self._set("mgntclass", str(value))

    def data_class(self, value: Any) -> "DatasetCreateBuilder":
        """SMS data class."""
        return self._set("dataclass", str(value))

    def dataset_type(self, value: Any) -> "DatasetCreateBuilder":
        """Dataset name type, such as LIBRARY."""
        return self._set("dsntype", str(value))

    def model_dataset(self, value: Any) -> "DatasetCreateBuilder":
        """Dataset whose attributes are copied."""
        return self._set("like", str(value))

    def _path(self) -> str:
        return f"/zosmf/restfiles/ds/{self._dataset}"

    def _body(self) -> Mapping[str, Any]:
        body = {
            key: self._attributes[key] for key in _BODY_KEYS if key in self._attributes
        }
        return {"json": body}