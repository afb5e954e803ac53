# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
The watsonx.data service client.

- WatsonxDataV2: one async method per shipped v2 operation
- ServiceConfig: endpoint, headers, timeouts and retry policy
- IngestionJobsPager: pages through list_ingestion_jobs
- operations: the OperationDescriptor catalogue
"""

from . import operations
from .base import BaseService
from .config import DEFAULT_SERVICE_NAME, DEFAULT_SERVICE_URL, ServiceConfig
from .models import (
    BucketDetails,
    BucketRegistration,
    BucketRegistrationCollection,
    CollectionPage,
    IngestionJob,
    IngestionJobCollection,
)
from .v2 import IngestionJobsPager, WatsonxDataV2

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SERVICE_URL",
    "BaseService",
    "BucketDetails",
    "BucketRegistration",
    "BucketRegistrationCollection",
    "CollectionPage",
    "IngestionJob",
    "IngestionJobCollection",
    "IngestionJobsPager",
    "ServiceConfig",
    "WatsonxDataV2",
    "operations",
]
