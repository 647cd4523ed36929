from oasroutes.models import Components, Operation, OperationType, Parameter, ParameterIn
from oasroutes.resource import Resource, resource, tagged_resource
from oasroutes.route import METHODS, api_operation, delete, get, post


def _handler(tag="pet", path_params=0, components=None):
    operation = Operation(
        tags=[tag],
        parameters=[Parameter(location=ParameterIn.PATH) for _ in range(path_params)],
    )

    @api_operation(operation, components)
    def handler():
        return None

    return handler


def _items(res):
    target = {}
    res.update_path_items(target)
    return target


def test_route_names_path_parameters():
    res = resource("/{plop_id}/{clap_name}").route(get().to(_handler(path_params=2)))
    items = _items(res)
    op = items["/{plop_id}/{clap_name}"].operations[OperationType.GET]
    assert [p.name for p in op.parameters] == ["plop_id", "clap_name"]


def test_tagged_resource_appends_tags_after_operation_tags():
    res = tagged_resource("/line/{plop_id}", ["Another super tag"]).route(get().to(_handler()))
    op = _items(res)["/line/{plop_id}"].operations[OperationType.GET]
    assert op.tags == ["pet", "Another super tag"]


def test_multiple_routes_share_path_item():
    res = (
        resource("")
        .route(get().to(_handler()))
        .route(post().to(_handler()))
        .route(delete().to(_handler()))
    )
    ops = _items(res)[""].operations
    assert list(ops) == [OperationType.GET, OperationType.POST, OperationType.DELETE]


def test_to_documents_every_method():
    res = tagged_resource("/all", ["x"]).to(_handler())
    ops = _items(res)["/all"].operations
    assert tuple(ops) == METHODS
    assert all(op.tags == ["pet", "x"] for op in ops.values())
    ops[OperationType.GET].tags.append("changed")
    assert ops[OperationType.PUT].tags == ["pet", "x"]


def test_undocumented_handler_adds_no_path():
    res = resource("/plain").route(get().to(lambda: None)).to(lambda: None)
    assert _items(res) == {}
    assert len(res.routes) == 2


def test_components_are_collected():
    comp = Components(schemas={"Test": {"type": "string"}})
    res = resource("/c").route(get().to(_handler(components=[comp])))
    assert res.components == [comp]


def test_update_path_items_takes_definition():
    res = resource("/a").route(get().to(_handler()))
    assert list(_items(res)) == ["/a"]
    assert res.item_definition is None
    assert _items(res) == {}


def test_proxies_do_not_change_documentation():
    plain = resource("/p").route(get().to(_handler()))
    proxied = (
        Resource("/p")
        .name("named")
        .guard(lambda request: True)
        .app_data("data")
        .wrap("middleware")
        .default_service("fallback")
        .route(get().to(_handler()))
    )
    assert _items(proxied) == _items(plain)
    assert proxied.resource_name == "named"
    assert proxied.middleware == ["middleware"]
    assert proxied.default == "fallback"