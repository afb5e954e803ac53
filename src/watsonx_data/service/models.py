# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response models for watsonx.data resources.

Models are lenient: unknown fields are kept, and fields the service may omit
default to None, so newer server versions still validate.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ResourceModel(BaseModel):
    """Base for service resources; keeps fields the model does not declare."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class BucketType(str, Enum):
    AMAZON_S3 = "amazon_s3"
    AWS_S3 = "aws_s3"
    MINIO = "minio"
    IBM_COS = "ibm_cos"
    IBM_CEPH = "ibm_ceph"


class ManagedBy(str, Enum):
    IBM = "ibm"
    CUSTOMER = "customer"


class SourceFileType(str, Enum):
    CSV = "csv"
    PARQUET = "parquet"


class CollectionPage(ResourceModel):
    """A page link in a paginated collection."""

    href: str | None = None
    start: str | None = None


class BucketDetails(ResourceModel):
    bucket_name: str
    access_key: str | None = None
    endpoint: str | None = None
    secret_key: str | None = None


class BucketCatalog(ResourceModel):
    catalog_name: str | None = None
    catalog_type: str | None = None
    catalog_tags: list[str] | None = None


class BucketRegistration(ResourceModel):
    """A registered object-storage bucket."""

    bucket_id: str | None = None
    bucket_display_name: str | None = None
    bucket_type: BucketType | str | None = None
    bucket_details: BucketDetails | None = None
    associated_catalog: BucketCatalog | None = None
    description: str | None = None
    managed_by: ManagedBy | str | None = None
    region: str | None = None
    state: str | None = None
    created_by: str | None = None
    created_on: str | None = None
    actions: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class BucketRegistrationCollection(ResourceModel):
    bucket_registrations: list[BucketRegistration] = Field(default_factory=list)


class IngestionJobCsvProperty(ResourceModel):
    encoding: str | None = None
    escape_character: str | None = None
    field_delimiter: str | None = None
    header: bool | None = None
    line_delimiter: str | None = None


class IngestionJobExecuteConfig(ResourceModel):
    driver_cores: int | None = None
    driver_memory: str | None = None
    executor_cores: int | None = None
    executor_memory: str | None = None
    num_executors: int | None = None


class IngestionJob(ResourceModel):
    """One ingestion job as returned by the ingestion_jobs listing."""

    job_id: str | None = None
    instance_id: str | None = None
    status: str | None = None
    target_table: str | None = None
    source_data_files: str | None = None
    source_file_type: SourceFileType | str | None = None
    engine_id: str | None = None
    engine_name: str | None = None
    username: str | None = None
    details: str | None = None
    partition_by: str | None = None
    schema_: str | None = Field(default=None, alias="schema")
    create_if_not_exist: bool | None = None
    validate_csv_header: bool | None = None
    start_timestamp: str | None = None
    end_timestamp: str | None = None
    csv_property: IngestionJobCsvProperty | None = None
    execute_config: IngestionJobExecuteConfig | None = None


class IngestionJobCollection(ResourceModel):
    ingestion_jobs: list[IngestionJob] = Field(default_factory=list)
    first: CollectionPage | None = None
    next: CollectionPage | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None and bool(self.next.start or self.next.href)


__all__ = [
    "BucketCatalog",
    "BucketDetails",
    "BucketRegistration",
    "BucketRegistrationCollection",
    "BucketType",
    "CollectionPage",
    "IngestionJob",
    "IngestionJobCollection",
    "IngestionJobCsvProperty",
    "IngestionJobExecuteConfig",
    "ManagedBy",
    "ResourceModel",
    "SourceFileType",
]
