# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
watsonx.data v2 client.

Every method takes the operation's parameters as snake_case keywords plus an
optional ``headers`` override map, and returns a DetailedResponse. Parameters
are validated before any I/O: a missing required parameter raises
MissingRequiredParameterError, an unknown one InvalidParameterError.

Example:
    async with WatsonxDataV2(BearerTokenAuthenticator(token)) as service:
        response = await service.get_bucket_registration(bucket_id="abc")
        bucket = response.as_model(BucketRegistration)
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..pagination.pager import Pager
from ..types.response import DetailedResponse
from . import operations as ops
from .base import BaseService
from .config import DEFAULT_SERVICE_NAME, DEFAULT_SERVICE_URL
from .models import IngestionJob


class WatsonxDataV2(BaseService):
    """Client for the watsonx.data v2 REST API."""

    DEFAULT_SERVICE_URL: ClassVar[str] = DEFAULT_SERVICE_URL
    DEFAULT_SERVICE_NAME: ClassVar[str] = DEFAULT_SERVICE_NAME
    service_version: ClassVar[str] = "V2"

    # === Bucket registrations ===

    async def list_bucket_registrations(self, **params: Any) -> DetailedResponse:
        """Get the list of registered buckets."""
        return await self.invoke(ops.LIST_BUCKET_REGISTRATIONS, params)

    async def create_bucket_registration(self, **params: Any) -> DetailedResponse:
        """
        Register a bucket.

        Required: bucket_details, bucket_type, description, managed_by.
        Optional: associated_catalog, bucket_display_name, region, tags.
        """
        return await self.invoke(ops.CREATE_BUCKET_REGISTRATION, params)

    async def get_bucket_registration(self, **params: Any) -> DetailedResponse:
        """Get a registered bucket by ``bucket_id``."""
        return await self.invoke(ops.GET_BUCKET_REGISTRATION, params)

    async def deregister_bucket(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DEREGISTER_BUCKET, params)

    async def update_bucket_registration(self, **params: Any) -> DetailedResponse:
        """
        Update bucket details and credentials (merge-patch).

        Required: bucket_id.
        Optional: bucket_details, bucket_display_name, description, tags.
        """
        return await self.invoke(ops.UPDATE_BUCKET_REGISTRATION, params)

    async def create_activate_bucket(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.ACTIVATE_BUCKET, params)

    async def delete_deactivate_bucket(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DEACTIVATE_BUCKET, params)

    async def list_bucket_objects(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_BUCKET_OBJECTS, params)

    # === Database registrations ===

    async def list_database_registrations(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_DATABASE_REGISTRATIONS, params)

    async def create_database_registration(self, **params: Any) -> DetailedResponse:
        """
        Register a database.

        Required: database_display_name, database_type.
        """
        return await self.invoke(ops.CREATE_DATABASE_REGISTRATION, params)

    async def get_database(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.GET_DATABASE, params)

    async def delete_database_catalog(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DELETE_DATABASE_CATALOG, params)

    async def update_database(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.UPDATE_DATABASE, params)

    # === Presto engine catalogs ===

    async def list_presto_engine_catalogs(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_PRESTO_ENGINE_CATALOGS, params)

    async def delete_presto_engine_catalogs(self, **params: Any) -> DetailedResponse:
        """
        Disassociate catalogs from a Presto engine.

        ``catalog_names`` may be a list; it is sent comma-joined.
        """
        return await self.invoke(ops.DELETE_PRESTO_ENGINE_CATALOGS, params)

    # === Spark engine applications ===

    async def list_spark_engine_applications(self, **params: Any) -> DetailedResponse:
        """List applications of a Spark engine, optionally filtered by ``state``."""
        return await self.invoke(ops.LIST_SPARK_ENGINE_APPLICATIONS, params)

    async def get_spark_engine_application_status(
        self, **params: Any
    ) -> DetailedResponse:
        return await self.invoke(ops.GET_SPARK_ENGINE_APPLICATION_STATUS, params)

    async def delete_spark_engine_applications(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DELETE_SPARK_ENGINE_APPLICATIONS, params)

    # === Catalogs ===

    async def list_catalogs(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_CATALOGS, params)

    async def get_catalog(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.GET_CATALOG, params)

    async def update_sync_catalog(self, **params: Any) -> DetailedResponse:
        """Sync external Iceberg table metadata into a catalog."""
        return await self.invoke(ops.UPDATE_SYNC_CATALOG, params)

    # === Schemas ===

    async def list_schemas(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_SCHEMAS, params)

    async def create_schema(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.CREATE_SCHEMA, params)

    async def delete_schema(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DELETE_SCHEMA, params)

    # === Tables ===

    async def list_tables(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_TABLES, params)

    async def get_table(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.GET_TABLE, params)

    async def delete_table(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DELETE_TABLE, params)

    async def rename_table(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.RENAME_TABLE, params)

    async def list_table_snapshots(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_TABLE_SNAPSHOTS, params)

    async def rollback_table(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.ROLLBACK_TABLE, params)

    # === Columns ===

    async def list_columns(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_COLUMNS, params)

    async def create_columns(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.CREATE_COLUMNS, params)

    async def delete_column(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DELETE_COLUMN, params)

    async def update_column(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.UPDATE_COLUMN, params)

    # === Milvus services ===

    async def list_milvus_services(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.LIST_MILVUS_SERVICES, params)

    async def create_milvus_service(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.CREATE_MILVUS_SERVICE, params)

    async def get_milvus_service(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.GET_MILVUS_SERVICE, params)

    async def delete_milvus_service(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.DELETE_MILVUS_SERVICE, params)

    async def update_milvus_service(self, **params: Any) -> DetailedResponse:
        return await self.invoke(ops.UPDATE_MILVUS_SERVICE, params)

    # === Ingestion jobs ===

    async def list_ingestion_jobs(self, **params: Any) -> DetailedResponse:
        """
        Get one page of ingestion jobs.

        Required: auth_instance_id. Optional: start, jobs_per_page.
        Use ingestion_jobs_pager() to walk every page.
        """
        return await self.invoke(ops.LIST_INGESTION_JOBS, params)

    def ingestion_jobs_pager(self, **params: Any) -> IngestionJobsPager:
        return IngestionJobsPager(self, params)


class IngestionJobsPager(Pager[IngestionJob]):
    """
    Pager over list_ingestion_jobs yielding IngestionJob models.

    Raises:
        ValueError: if ``start`` is passed in ``params``
    """

    def __init__(self, client: WatsonxDataV2, params: dict[str, Any] | None = None):
        super().__init__(
            client,
            ops.LIST_INGESTION_JOBS,
            params,
            result_field="ingestion_jobs",
            token_param="start",
            item_model=IngestionJob,
            metrics=client.metrics,
        )


__all__ = [
    "IngestionJobsPager",
    "WatsonxDataV2",
]
