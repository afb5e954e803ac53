"""
Tests for RequestBuilder.

Covers parameter validation, path/query/body routing, header precedence,
array serialization and multipart bodies.
"""

from __future__ import annotations

import io
import json

import pytest

from watsonx_data import __version__
from watsonx_data.exceptions import (
    InvalidParameterError,
    MissingRequiredParameterError,
)
from watsonx_data.request.builder import (
    SDK_ANALYTICS_HEADER,
    RequestBuilder,
    encode_path_segment,
    get_sdk_headers,
    merge_headers,
    serialize_query_value,
)
from watsonx_data.service import operations as ops
from watsonx_data.service.models import BucketDetails
from watsonx_data.types.operation import (
    ArrayStyle,
    OperationDescriptor,
    body,
    form,
    path,
    query,
)

SERVICE_URL = "https://lakehouse.example.com/lakehouse/api/v2"


@pytest.fixture
def builder() -> RequestBuilder:
    return RequestBuilder(SERVICE_URL)


# =============================================================================
# Required parameters
# =============================================================================


class TestRequiredParameters:
    @pytest.mark.parametrize(
        "operation",
        [op for op in ops.ALL_OPERATIONS if op.required_parameters],
        ids=lambda op: op.operation_id,
    )
    @pytest.mark.parametrize("params", [None, {}])
    def test_every_operation_rejects_empty_params(self, builder, operation, params):
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            builder.build(operation, params)
        expected = tuple(p.name for p in operation.required_parameters)
        assert exc_info.value.missing == expected
        assert exc_info.value.operation_id == operation.operation_id

    def test_missing_parameters_collected(self, builder):
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            builder.build(ops.CREATE_BUCKET_REGISTRATION, {"bucket_type": "ibm_cos"})
        assert exc_info.value.missing == ("bucket_details", "description", "managed_by")

    def test_none_counts_as_missing(self, builder):
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            builder.build(ops.GET_BUCKET_REGISTRATION, {"bucket_id": None})
        assert exc_info.value.missing == ("bucket_id",)

    def test_missing_reported_before_invalid(self, builder):
        with pytest.raises(MissingRequiredParameterError):
            builder.build(ops.GET_BUCKET_REGISTRATION, {"bogus": 1})

    def test_unknown_parameter_rejected(self, builder):
        with pytest.raises(InvalidParameterError) as exc_info:
            builder.build(ops.GET_BUCKET_REGISTRATION, {"bucket_id": "b", "bogus": 1})
        assert exc_info.value.invalid == ("bogus",)

    def test_headers_entry_is_not_a_parameter(self, builder):
        request = builder.build(ops.LIST_CATALOGS, {"headers": {"X-Test": "1"}})
        assert request.get_header("X-Test") == "1"


# =============================================================================
# Routing
# =============================================================================


class TestRouting:
    def test_path_query_and_body_land_in_their_slots(self, builder):
        request = builder.build(
            ops.RENAME_TABLE,
            {
                "catalog_id": "iceberg_data",
                "schema_id": "sales",
                "table_id": "orders",
                "engine_id": "presto01",
                "table_name": "orders_v2",
            },
        )
        assert request.method == "PATCH"
        assert request.url == (
            f"{SERVICE_URL}/catalogs/iceberg_data/schemas/sales/tables/orders"
        )
        assert request.query == {"engine_id": "presto01"}
        assert request.json == {"table_name": "orders_v2"}
        assert request.get_header("Content-Type") == "application/merge-patch+json"

    def test_wire_names_used_for_body(self, builder):
        op = OperationDescriptor(
            "create_thing",
            "POST",
            "/things/{thing_id}",
            (
                path("thing_id", wire_name="thing_id"),
                query("dry_run"),
                body("display_name", wire_name="bucket_display_name"),
            ),
        )
        request = builder.build(
            op, {"thing_id": "t1", "dry_run": True, "display_name": "Raw data"}
        )
        assert request.url == f"{SERVICE_URL}/things/t1"
        assert request.query == {"dry_run": "true"}
        assert request.json == {"bucket_display_name": "Raw data"}

    def test_path_segments_percent_encoded(self, builder):
        request = builder.build(ops.GET_BUCKET_REGISTRATION, {"bucket_id": "a b/c"})
        assert request.url.endswith("/bucket_registrations/a%20b%2Fc")

    def test_none_body_fields_dropped(self, builder):
        request = builder.build(
            ops.UPDATE_BUCKET_REGISTRATION,
            {"bucket_id": "b1", "description": "new", "tags": None},
        )
        assert request.json == {"description": "new"}

    def test_body_operation_without_fields_sends_empty_object(self, builder):
        request = builder.build(ops.UPDATE_BUCKET_REGISTRATION, {"bucket_id": "b1"})
        assert request.json == {}
        assert request.get_header("Content-Type") == "application/merge-patch+json"

    def test_bodiless_post_sends_no_content_type(self, builder):
        request = builder.build(ops.ACTIVATE_BUCKET, {"bucket_id": "b1"})
        assert request.method == "POST"
        assert request.json is None
        assert request.get_header("Content-Type") is None

    def test_none_query_values_dropped(self, builder):
        request = builder.build(
            ops.LIST_INGESTION_JOBS,
            {"auth_instance_id": "crn:1", "start": None, "jobs_per_page": 10},
        )
        assert request.query == {"jobs_per_page": "10"}

    def test_pydantic_body_values_serialized(self, builder):
        request = builder.build(
            ops.CREATE_BUCKET_REGISTRATION,
            {
                "bucket_details": BucketDetails(bucket_name="sample-bucket"),
                "bucket_type": "ibm_cos",
                "description": "COS bucket",
                "managed_by": "ibm",
            },
        )
        assert request.json["bucket_details"] == {"bucket_name": "sample-bucket"}
        json.dumps(request.json)

    def test_models_nested_in_mappings_serialized(self, builder):
        operation = OperationDescriptor(
            "update_things", "PATCH", "/things", (body("properties"),)
        )
        request = builder.build(
            operation,
            {
                "properties": {
                    "primary": BucketDetails(bucket_name="b1"),
                    "replicas": [{"details": BucketDetails(bucket_name="b2")}],
                    "note": None,
                }
            },
        )
        assert request.json == {
            "properties": {
                "primary": {"bucket_name": "b1"},
                "replicas": [{"details": {"bucket_name": "b2"}}],
                "note": None,
            }
        }
        json.dumps(request.json)

    def test_delete_operations_send_no_accept(self, builder):
        request = builder.build(ops.DEREGISTER_BUCKET, {"bucket_id": "b1"})
        assert request.method == "DELETE"
        assert request.get_header("Accept") is None


class TestGetSingleResource:
    def test_built_request(self, builder):
        request = builder.build(
            ops.GET_BUCKET_REGISTRATION, {"bucket_id": "abc", "headers": {}}
        )
        assert request.method == "GET"
        assert request.url == f"{SERVICE_URL}/bucket_registrations/abc"
        assert request.get_header("Accept") == "application/json"
        assert request.get_header("Content-Type") is None
        assert request.json is None
        assert request.files is None


# =============================================================================
# Headers
# =============================================================================


class TestHeaders:
    def test_caller_headers_override_computed(self, builder):
        request = builder.build(
            ops.CREATE_MILVUS_SERVICE,
            {"origin": "native", "headers": {"Accept": "X", "Content-Type": "Y"}},
        )
        assert request.get_header("Accept") == "X"
        assert request.get_header("Content-Type") == "Y"

    def test_caller_override_case_insensitive(self, builder):
        request = builder.build(
            ops.LIST_CATALOGS, {"headers": {"accept": "text/plain"}}
        )
        accept_headers = [k for k in request.headers if k.lower() == "accept"]
        assert accept_headers == ["accept"]
        assert request.headers["accept"] == "text/plain"

    def test_auth_instance_id_header(self, builder):
        request = builder.build(ops.LIST_CATALOGS, {"auth_instance_id": "crn:v1:x"})
        assert request.get_header("AuthInstanceId") == "crn:v1:x"

    def test_caller_beats_auth_instance_id_parameter(self, builder):
        request = builder.build(
            ops.LIST_CATALOGS,
            {"auth_instance_id": "crn:a", "headers": {"AuthInstanceId": "crn:b"}},
        )
        assert request.get_header("AuthInstanceId") == "crn:b"

    def test_headers_keyword_applied_over_params_headers(self, builder):
        request = builder.build(
            ops.LIST_CATALOGS,
            {"headers": {"X-Test": "from-params"}},
            headers={"X-Test": "from-keyword"},
        )
        assert request.get_header("X-Test") == "from-keyword"

    def test_default_headers_below_computed(self):
        builder = RequestBuilder(
            SERVICE_URL, default_headers={"Accept": "text/csv", "X-Team": "data"}
        )
        request = builder.build(ops.LIST_CATALOGS)
        assert request.get_header("Accept") == "application/json"
        assert request.get_header("X-Team") == "data"

    def test_sdk_analytics_headers(self, builder):
        request = builder.build(ops.LIST_CATALOGS)
        assert request.get_header("User-Agent") == (
            f"watsonx-data-python-sdk/{__version__}"
        )
        assert request.get_header(SDK_ANALYTICS_HEADER) == (
            "service_name=watsonx_data;service_version=V2;operation_id=list_catalogs"
        )

    def test_get_sdk_headers(self):
        headers = get_sdk_headers("svc", "V9", "op")
        assert headers[SDK_ANALYTICS_HEADER] == (
            "service_name=svc;service_version=V9;operation_id=op"
        )


class TestMergeHeaders:
    def test_later_layers_win(self):
        merged = merge_headers({"A": "1", "B": "1"}, {"b": "2"})
        assert merged == {"A": "1", "b": "2"}

    def test_none_values_skipped(self):
        assert merge_headers({"A": "1"}, {"A": None}) == {"A": "1"}

    def test_empty_layers(self):
        assert merge_headers(None, {}, {"A": 1}) == {"A": "1"}


# =============================================================================
# Serialization helpers
# =============================================================================


class TestQuerySerialization:
    def test_csv_arrays(self, builder):
        request = builder.build(
            ops.LIST_SPARK_ENGINE_APPLICATIONS,
            {"engine_id": "spark01", "state": ["accepted", "running"]},
        )
        assert request.query == {"state": "accepted,running"}

    def test_delete_presto_catalogs_joined(self, builder):
        request = builder.build(
            ops.DELETE_PRESTO_ENGINE_CATALOGS,
            {"engine_id": "presto01", "catalog_names": ["iceberg", "hive"]},
        )
        assert request.query == {"catalog_names": "iceberg,hive"}

    def test_multi_arrays(self):
        spec = query("state", array_style=ArrayStyle.MULTI)
        assert serialize_query_value(spec, ("a", "b")) == ["a", "b"]

    def test_booleans_lower_case(self):
        assert serialize_query_value(query("flag"), False) == "false"

    def test_encode_path_segment(self):
        assert encode_path_segment("x/y z") == "x%2Fy%20z"
        assert encode_path_segment(42) == "42"


class TestMultipart:
    @pytest.fixture
    def upload_op(self) -> OperationDescriptor:
        return OperationDescriptor(
            "upload_file",
            "POST",
            "/files",
            (
                form("file", required=True, content_type_param="file_content_type"),
                form("metadata"),
                form("label"),
            ),
        )

    def test_form_parts(self, builder, upload_op):
        handle = io.BytesIO(b"id,name\n1,a\n")
        handle.name = "/tmp/data.csv"
        request = builder.build(
            upload_op,
            {
                "file": handle,
                "file_content_type": "text/csv",
                "metadata": {"format": "csv"},
                "label": "daily",
            },
        )
        assert request.json is None
        parts = dict(request.files)
        assert parts["file"] == ("data.csv", handle, "text/csv")
        assert parts["metadata"] == (None, b'{"format": "csv"}', "application/json")
        assert parts["label"] == (None, b"daily", None)

    def test_binary_defaults(self, builder, upload_op):
        request = builder.build(upload_op, {"file": b"\x00\x01"})
        assert request.files == [
            ("file", ("file", b"\x00\x01", "application/octet-stream"))
        ]

    def test_no_content_type_header_for_multipart(self, builder, upload_op):
        request = builder.build(upload_op, {"file": b"x"})
        assert request.get_header("Content-Type") is None
        assert request.get_header("Accept") == "application/json"

    def test_multipart_operation_without_parts(self, builder):
        operation = OperationDescriptor(
            "upload_optional", "POST", "/files", (form("label"), body("ignored"))
        )
        request = builder.build(operation, {"ignored": "x"})
        assert request.files == []
        assert request.json is None
        assert request.get_header("Content-Type") is None

    def test_json_operation_sends_no_parts(self, builder):
        request = builder.build(ops.LIST_BUCKET_REGISTRATIONS)
        assert request.files is None
