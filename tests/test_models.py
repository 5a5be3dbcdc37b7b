from openapi_smoke.parser.base import (
    ApiDocument,
    HttpMethod,
    Operation,
    OperationDescriptor,
    PathItem,
    Server,
)


class TestHttpMethod:
    def test_fixed_order(self):
        assert [m.value for m in HttpMethod] == [
            "get", "post", "put", "patch", "delete", "head", "options",
        ]

    def test_lookup_by_value(self):
        assert HttpMethod("patch") is HttpMethod.PATCH


class TestOperation:
    def test_from_mapping(self):
        op = Operation.from_raw({"summary": "List users", "security": [{"apiKey": []}]})
        assert op.summary == "List users"
        assert op.security == [{"apiKey": []}]

    def test_null_body_is_empty_operation(self):
        op = Operation.from_raw(None)
        assert op.summary is None
        assert op.security is None

    def test_non_string_summary_is_coerced(self):
        assert Operation.from_raw({"summary": 42}).summary == "42"

    def test_empty_security_list_is_kept(self):
        assert Operation.from_raw({"security": []}).security == []

    def test_security_passed_through_unchanged(self):
        assert Operation.from_raw({"security": {"apiKey": []}}).security == {"apiKey": []}
        assert Operation.from_raw({"security": "bearer"}).security == "bearer"


class TestPathItem:
    def test_only_known_methods_are_kept(self):
        item = PathItem.from_raw({
            "parameters": [{"name": "id", "in": "path"}],
            "trace": {},
            "get": {},
            "delete": {"summary": "Remove"},
        })
        assert set(item.operations) == {HttpMethod.GET, HttpMethod.DELETE}
        assert item.get(HttpMethod.DELETE).summary == "Remove"
        assert item.get(HttpMethod.POST) is None

    def test_method_keys_are_case_sensitive(self):
        item = PathItem.from_raw({"GET": {}})
        assert item.operations == {}

    def test_null_path_item(self):
        assert PathItem.from_raw(None).operations == {}


class TestApiDocument:
    def test_defaults(self):
        doc = ApiDocument()
        assert doc.paths == {}
        assert doc.servers is None
        assert doc.default_server_url is None

    def test_default_server_is_first(self):
        doc = ApiDocument(servers=[Server(url="https://a"), Server(url="https://b")])
        assert doc.default_server_url == "https://a"

    def test_empty_servers_list(self):
        assert ApiDocument(servers=[]).default_server_url is None


class TestOperationDescriptor:
    def test_label(self):
        d = OperationDescriptor(method=HttpMethod.GET, path="/users/{id}")
        assert d.label == "GET /users/{id}"
        assert d.operation == Operation()
