# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Operation catalogue of the watsonx.data v2 API.

Each constant is an immutable OperationDescriptor. Caller-facing parameter
names are snake_case and match the wire names unless a descriptor says
otherwise. Every operation accepts the optional ``auth_instance_id`` header
parameter (required for ingestion jobs).

DELETE operations declare no Accept header; PATCH operations send
merge-patch bodies.
"""

from ..types.operation import (
    OperationDescriptor,
    auth_instance_id,
    body,
    path,
    query,
)

# === Bucket registrations ===

LIST_BUCKET_REGISTRATIONS = OperationDescriptor(
    "list_bucket_registrations",
    "GET",
    "/bucket_registrations",
    (auth_instance_id(),),
)

CREATE_BUCKET_REGISTRATION = OperationDescriptor(
    "create_bucket_registration",
    "POST",
    "/bucket_registrations",
    (
        body("bucket_details", required=True),
        body("bucket_type", required=True),
        body("description", required=True),
        body("managed_by", required=True),
        body("associated_catalog"),
        body("bucket_display_name"),
        body("region"),
        body("tags"),
        auth_instance_id(),
    ),
)

GET_BUCKET_REGISTRATION = OperationDescriptor(
    "get_bucket_registration",
    "GET",
    "/bucket_registrations/{bucket_id}",
    (path("bucket_id"), auth_instance_id()),
)

DEREGISTER_BUCKET = OperationDescriptor(
    "deregister_bucket",
    "DELETE",
    "/bucket_registrations/{bucket_id}",
    (path("bucket_id"), auth_instance_id()),
    accept=None,
)

UPDATE_BUCKET_REGISTRATION = OperationDescriptor(
    "update_bucket_registration",
    "PATCH",
    "/bucket_registrations/{bucket_id}",
    (
        path("bucket_id"),
        body("bucket_details"),
        body("bucket_display_name"),
        body("description"),
        body("tags"),
        auth_instance_id(),
    ),
)

ACTIVATE_BUCKET = OperationDescriptor(
    "create_activate_bucket",
    "POST",
    "/bucket_registrations/{bucket_id}/activate",
    (path("bucket_id"), auth_instance_id()),
)

DEACTIVATE_BUCKET = OperationDescriptor(
    "delete_deactivate_bucket",
    "DELETE",
    "/bucket_registrations/{bucket_id}/deactivate",
    (path("bucket_id"), auth_instance_id()),
    accept=None,
)

LIST_BUCKET_OBJECTS = OperationDescriptor(
    "list_bucket_objects",
    "GET",
    "/bucket_registrations/{bucket_id}/objects",
    (path("bucket_id"), auth_instance_id()),
)

# === Database registrations ===

LIST_DATABASE_REGISTRATIONS = OperationDescriptor(
    "list_database_registrations",
    "GET",
    "/database_registrations",
    (auth_instance_id(),),
)

CREATE_DATABASE_REGISTRATION = OperationDescriptor(
    "create_database_registration",
    "POST",
    "/database_registrations",
    (
        body("database_display_name", required=True),
        body("database_type", required=True),
        body("associated_catalog"),
        body("created_on"),
        body("database_details"),
        body("database_properties"),
        body("description"),
        body("tags"),
        auth_instance_id(),
    ),
)

GET_DATABASE = OperationDescriptor(
    "get_database",
    "GET",
    "/database_registrations/{database_id}",
    (path("database_id"), auth_instance_id()),
)

DELETE_DATABASE_CATALOG = OperationDescriptor(
    "delete_database_catalog",
    "DELETE",
    "/database_registrations/{database_id}",
    (path("database_id"), auth_instance_id()),
    accept=None,
)

UPDATE_DATABASE = OperationDescriptor(
    "update_database",
    "PATCH",
    "/database_registrations/{database_id}",
    (
        path("database_id"),
        body("database_details"),
        body("database_display_name"),
        body("description"),
        body("tags"),
        auth_instance_id(),
    ),
)

# === Presto engine catalogs ===

LIST_PRESTO_ENGINE_CATALOGS = OperationDescriptor(
    "list_presto_engine_catalogs",
    "GET",
    "/presto_engines/{engine_id}/catalogs",
    (path("engine_id"), auth_instance_id()),
)

DELETE_PRESTO_ENGINE_CATALOGS = OperationDescriptor(
    "delete_presto_engine_catalogs",
    "DELETE",
    "/presto_engines/{engine_id}/catalogs",
    (
        path("engine_id"),
        query("catalog_names", required=True),
        auth_instance_id(),
    ),
    accept=None,
)

# === Spark engine applications ===

LIST_SPARK_ENGINE_APPLICATIONS = OperationDescriptor(
    "list_spark_engine_applications",
    "GET",
    "/spark_engines/{engine_id}/applications",
    (path("engine_id"), query("state"), auth_instance_id()),
)

GET_SPARK_ENGINE_APPLICATION_STATUS = OperationDescriptor(
    "get_spark_engine_application_status",
    "GET",
    "/spark_engines/{engine_id}/applications/{application_id}",
    (path("engine_id"), path("application_id"), auth_instance_id()),
)

DELETE_SPARK_ENGINE_APPLICATIONS = OperationDescriptor(
    "delete_spark_engine_applications",
    "DELETE",
    "/spark_engines/{engine_id}/applications",
    (
        path("engine_id"),
        query("application_id", required=True),
        query("state"),
        auth_instance_id(),
    ),
    accept=None,
)

# === Catalogs ===

LIST_CATALOGS = OperationDescriptor(
    "list_catalogs",
    "GET",
    "/catalogs",
    (auth_instance_id(),),
)

GET_CATALOG = OperationDescriptor(
    "get_catalog",
    "GET",
    "/catalogs/{catalog_id}",
    (path("catalog_id"), auth_instance_id()),
)

UPDATE_SYNC_CATALOG = OperationDescriptor(
    "update_sync_catalog",
    "PATCH",
    "/catalogs/{catalog_id}/sync",
    (
        path("catalog_id"),
        body("auto_add_new_tables", required=True),
        body("sync_iceberg_md", required=True),
        auth_instance_id(),
    ),
)

# === Schemas ===

LIST_SCHEMAS = OperationDescriptor(
    "list_schemas",
    "GET",
    "/catalogs/{catalog_id}/schemas",
    (query("engine_id", required=True), path("catalog_id"), auth_instance_id()),
)

CREATE_SCHEMA = OperationDescriptor(
    "create_schema",
    "POST",
    "/catalogs/{catalog_id}/schemas",
    (
        query("engine_id", required=True),
        path("catalog_id"),
        body("custom_path", required=True),
        body("schema_name", required=True),
        body("bucket_name"),
        auth_instance_id(),
    ),
)

DELETE_SCHEMA = OperationDescriptor(
    "delete_schema",
    "DELETE",
    "/catalogs/{catalog_id}/schemas/{schema_id}",
    (
        query("engine_id", required=True),
        path("catalog_id"),
        path("schema_id"),
        auth_instance_id(),
    ),
    accept=None,
)

# === Tables ===

_TABLE_PATH = "/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}"
_TABLE_PARAMS = (
    path("catalog_id"),
    path("schema_id"),
    path("table_id"),
    query("engine_id", required=True),
)

LIST_TABLES = OperationDescriptor(
    "list_tables",
    "GET",
    "/catalogs/{catalog_id}/schemas/{schema_id}/tables",
    (
        path("catalog_id"),
        path("schema_id"),
        query("engine_id", required=True),
        auth_instance_id(),
    ),
)

GET_TABLE = OperationDescriptor(
    "get_table",
    "GET",
    _TABLE_PATH,
    (*_TABLE_PARAMS, auth_instance_id()),
)

DELETE_TABLE = OperationDescriptor(
    "delete_table",
    "DELETE",
    _TABLE_PATH,
    (*_TABLE_PARAMS, auth_instance_id()),
    accept=None,
)

RENAME_TABLE = OperationDescriptor(
    "rename_table",
    "PATCH",
    _TABLE_PATH,
    (*_TABLE_PARAMS, body("table_name"), auth_instance_id()),
)

LIST_TABLE_SNAPSHOTS = OperationDescriptor(
    "list_table_snapshots",
    "GET",
    _TABLE_PATH + "/snapshots",
    (*_TABLE_PARAMS, auth_instance_id()),
)

ROLLBACK_TABLE = OperationDescriptor(
    "rollback_table",
    "POST",
    _TABLE_PATH + "/rollback",
    (*_TABLE_PARAMS, body("snapshot_id"), auth_instance_id()),
)

# === Columns ===

LIST_COLUMNS = OperationDescriptor(
    "list_columns",
    "GET",
    _TABLE_PATH + "/columns",
    (*_TABLE_PARAMS, auth_instance_id()),
)

CREATE_COLUMNS = OperationDescriptor(
    "create_columns",
    "POST",
    _TABLE_PATH + "/columns",
    (*_TABLE_PARAMS, body("columns"), auth_instance_id()),
)

DELETE_COLUMN = OperationDescriptor(
    "delete_column",
    "DELETE",
    _TABLE_PATH + "/columns/{column_id}",
    (*_TABLE_PARAMS, path("column_id"), auth_instance_id()),
    accept=None,
)

UPDATE_COLUMN = OperationDescriptor(
    "update_column",
    "PATCH",
    _TABLE_PATH + "/columns/{column_id}",
    (*_TABLE_PARAMS, path("column_id"), body("column_name"), auth_instance_id()),
)

# === Milvus services ===

LIST_MILVUS_SERVICES = OperationDescriptor(
    "list_milvus_services",
    "GET",
    "/milvus_services",
    (auth_instance_id(),),
)

CREATE_MILVUS_SERVICE = OperationDescriptor(
    "create_milvus_service",
    "POST",
    "/milvus_services",
    (
        body("origin", required=True),
        body("description"),
        body("service_display_name"),
        body("tags"),
        auth_instance_id(),
    ),
)

GET_MILVUS_SERVICE = OperationDescriptor(
    "get_milvus_service",
    "GET",
    "/milvus_services/{service_id}",
    (path("service_id"), auth_instance_id()),
)

DELETE_MILVUS_SERVICE = OperationDescriptor(
    "delete_milvus_service",
    "DELETE",
    "/milvus_services/{service_id}",
    (path("service_id"), auth_instance_id()),
    accept=None,
)

UPDATE_MILVUS_SERVICE = OperationDescriptor(
    "update_milvus_service",
    "PATCH",
    "/milvus_services/{service_id}",
    (
        path("service_id"),
        body("description"),
        body("service_display_name"),
        body("tags"),
        auth_instance_id(),
    ),
)

# === Ingestion jobs ===

LIST_INGESTION_JOBS = OperationDescriptor(
    "list_ingestion_jobs",
    "GET",
    "/ingestion_jobs",
    (
        auth_instance_id(required=True),
        query("start"),
        query("jobs_per_page"),
    ),
)


ALL_OPERATIONS: tuple[OperationDescriptor, ...] = tuple(
    value for name, value in dict(globals()).items()
    if not name.startswith("_") and isinstance(value, OperationDescriptor)
)
"""Every operation declared in this module, in declaration order."""

OPERATIONS_BY_ID: dict[str, OperationDescriptor] = {
    op.operation_id: op for op in ALL_OPERATIONS
}
