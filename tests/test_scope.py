from oasroutes.models import Components, Operation, OperationType, Parameter, ParameterIn
from oasroutes.redirect import redirect
from oasroutes.resource import resource, tagged_resource
from oasroutes.route import api_operation, get, patch, post, put
from oasroutes.scope import scope, tagged_scope


def _handler(tag="pet", path_params=0, components=None):
    operation = Operation(
        tags=[tag] if tag else [],
        parameters=[Parameter(location=ParameterIn.PATH) for _ in range(path_params)],
    )

    @api_operation(operation, components)
    def handler():
        return None

    return handler


def _items(sc):
    target = {}
    sc.update_path_items(target)
    return target


def test_resource_path_joined_with_scope():
    sc = scope("test").service(resource("/{plop_id}/{clap_name}").route(get().to(_handler(path_params=2))))
    items = _items(sc)
    assert list(items) == ["test/{plop_id}/{clap_name}"]
    op = items["test/{plop_id}/{clap_name}"].operations[OperationType.GET]
    assert [p.name for p in op.parameters] == ["plop_id", "clap_name"]


def test_trailing_slash_kept_and_empty_resource_dropped():
    sc = (
        scope("/api")
        .service(scope("/ticket").service(resource("/").route(put().to(_handler()))))
        .service(scope("/account").service(resource("").route(put().to(_handler()))))
    )
    assert sorted(_items(sc)) == ["api/account", "api/ticket/"]


def test_empty_scope_path_is_skipped():
    sc = scope("").service(scope("/pet").service(resource("").route(post().to(_handler()))))
    assert list(_items(sc)) == ["pet"]


def test_tags_nest_from_inner_to_outer():
    sc = (
        tagged_scope("test", ["A super tag"])
        .service(resource("/{plop_id}/{clap_name}").route(get().to(_handler(path_params=2))))
        .service(tagged_resource("/line/{plop_id}", ["Another super tag"]).route(get().to(_handler(path_params=1))))
        .service(resource("/line2/{plop_id}").route(get().to(_handler(tag=None, path_params=1))))
    )
    items = _items(sc)
    assert items["test/{plop_id}/{clap_name}"].operations[OperationType.GET].tags == ["pet", "A super tag"]
    assert items["test/line/{plop_id}"].operations[OperationType.GET].tags == [
        "pet",
        "Another super tag",
        "A super tag",
    ]
    assert items["test/line2/{plop_id}"].operations[OperationType.GET].tags == ["A super tag"]


def test_route_and_configure_and_merging():
    def my_routes(cfg):
        cfg.service(resource("/users/{user_id}").route(post().to(_handler(path_params=1))))

    sc = (
        scope("test")
        .route("test3", patch().to(_handler()))
        .route("test4/{test_id}", patch().to(_handler(path_params=1)))
        .configure(my_routes)
        .service(scope("test5").route("", post().to(_handler())).route("", get().to(_handler())))
        .service(resource("test6").route(post().to(_handler())))
        .service(resource("test6").route(get().to(_handler())))
    )
    items = _items(sc)
    assert sorted(items) == [
        "test/test3",
        "test/test4/{test_id}",
        "test/test5",
        "test/test6",
        "test/users/{user_id}",
    ]
    assert sum(len(i.operations) for i in items.values()) == 7
    assert items["test/test4/{test_id}"].operations[OperationType.PATCH].parameters[0].name == "test_id"


def test_pattern_path_parameter():
    sc = scope("test").service(resource("/{plop_id:.+}/{clap_name}").route(get().to(_handler(path_params=2))))
    op = _items(sc)["test/{plop_id:.+}/{clap_name}"].operations[OperationType.GET]
    assert op.parameters[0].name == "plop_id"
    assert op.parameters[0].schema == {"pattern": ".+"}
    assert op.parameters[1].name == "clap_name"


def test_redirect_in_scope():
    sc = scope("test").service(redirect("/duck", "https://duck.com"))
    items = _items(sc)
    assert list(items) == ["test/duck"]
    assert len(items["test/duck"].operations) == 7


def test_components_collected_from_services():
    first = Components(schemas={"A": {"type": "string"}})
    second = Components(schemas={"B": {"type": "string"}})
    sc = (
        scope("test")
        .service(resource("/a").route(get().to(_handler(components=[first]))))
        .route("/b", get().to(_handler(components=[second])))
    )
    assert sc.components == [first, second]


def test_update_path_items_empties_scope():
    sc = scope("s").service(resource("/a").route(get().to(_handler())))
    assert list(_items(sc)) == ["s/a"]
    assert sc.item_map == {}


def test_proxies_do_not_change_documentation():
    sc = (
        scope("s")
        .guard(lambda request: True)
        .app_data(1)
        .wrap("middleware")
        .default_service("fallback")
        .service(resource("/a").route(get().to(_handler())))
    )
    assert list(_items(sc)) == ["s/a"]
    assert sc.data == [1]
    assert sc.middleware == ["middleware"]
    assert sc.default == "fallback"