"""Per-request GraphQL context."""

from typing import TypeVar, cast

from botocore.client import BaseClient

from fluorescence_scan.adapters.s3_storage import S3Bucket
from fluorescence_scan.domain.scans import FluorescenceScanRepository

T = TypeVar("T")


class MissingContextValueError(LookupError):
    """Raised when a resolver asks for a dependency the request never received."""

    def __init__(self, key: type) -> None:
        super().__init__(f"Request context has no value for {key.__name__}")
        self.key = key


class RequestContext:
    """Dependencies made available to resolvers for one request, keyed by type.

    Values are borrowed from process-wide owners; the context never closes them.
    """

    def __init__(self) -> None:
        self._values: dict[type, object] = {}

    def insert(self, key: type[T], value: T) -> None:
        """Attach ``value`` under ``key``, replacing any previous value."""
        self._values[key] = value

    def get(self, key: type[T]) -> T:
        """Return the value stored under ``key``."""
        try:
            return cast(T, self._values[key])
        except KeyError:
            raise MissingContextValueError(key) from None

    def __contains__(self, key: type) -> bool:
        return key in self._values


def build_request_context(
    database: FluorescenceScanRepository,
    s3_client: BaseClient,
    s3_bucket: S3Bucket,
) -> RequestContext:
    """Bundle the database handle, storage client and bucket for one request."""
    context = RequestContext()
    context.insert(FluorescenceScanRepository, database)
    context.insert(BaseClient, s3_client)
    context.insert(S3Bucket, s3_bucket)
    return context
