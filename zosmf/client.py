"""Entry point to the z/OSMF REST API and its dataset services."""

from __future__ import annotations

from typing import Any

import requests

from .core import ClientCore
from .datasets.copy import DatasetCopyBuilder, DatasetCopyFileBuilder
from .datasets.create import DatasetCreateBuilder
from .datasets.delete import DatasetDeleteBuilder
from .datasets.list import DatasetListBuilder
from .datasets.members import MemberListBuilder
from .datasets.migrate import DatasetMigrateBuilder, DatasetRecallBuilder
from .datasets.read import DatasetReadBuilder
from .datasets.rename import DatasetRenameBuilder
from .datasets.write import DatasetWriteBuilder


class DatasetsClient:
    """Starts requests against the z/OSMF dataset services."""

    def __init__(self, core: ClientCore) -> None:
        self.core = core

    def copy(self, from_dataset: Any, to_dataset: Any) -> DatasetCopyBuilder:
        """Copy a dataset or member into another dataset."""
        return DatasetCopyBuilder(self.core, from_dataset, to_dataset)

    def copy_file(self, from_path: Any, to_dataset: Any) -> DatasetCopyFileBuilder:
        """Copy a z/OS UNIX file into a dataset."""
        return DatasetCopyFileBuilder(self.core, from_path, to_dataset)

    def create(self, dataset: Any) -> DatasetCreateBuilder:
        """Allocate a new dataset."""
        return DatasetCreateBuilder(self.core, dataset)

    def delete(self, dataset: Any) -> DatasetDeleteBuilder:
        """Delete a dataset or member."""
        return DatasetDeleteBuilder(self.core, dataset)

    def list(self, level: Any) -> DatasetListBuilder:
        """List datasets whose names match ``level``."""
        return DatasetListBuilder(self.core, level)

    def members(self, dataset: Any) -> MemberListBuilder:
        """List the members of a partitioned dataset."""
        return MemberListBuilder(self.core, dataset)

    def migrate(self, dataset: Any) -> DatasetMigrateBuilder:
        """Migrate a dataset."""
        return DatasetMigrateBuilder(self.core, dataset)

    def read(self, dataset: Any) -> DatasetReadBuilder:
        """Read a dataset or member."""
        return DatasetReadBuilder(self.core, dataset)

    def recall(self, dataset: Any) -> DatasetRecallBuilder:
        """Recall a migrated dataset."""
        return DatasetRecallBuilder(self.core, dataset)

    def rename(self, from_dataset: Any, to_dataset: Any) -> DatasetRenameBuilder:
        """Rename a dataset or member."""
        return DatasetRenameBuilder(self.core, from_dataset, to_dataset)

    def write(self, dataset: Any) -> DatasetWriteBuilder:
        """Write to a dataset or member."""
        return DatasetWriteBuilder(self.core, dataset)


class ZOsmf:
    """A connection to one z/OSMF server."""

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.core = ClientCore(
            base_url, session if session is not None else requests.Session()
        )

    def datasets(self) -> DatasetsClient:
        """Return the client for the dataset services."""
        return DatasetsClient(self.core)