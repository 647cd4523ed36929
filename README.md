# oasroutes

`oasroutes` builds an OpenAPI 3.0 document from the way you declare routes,
resources, scopes and redirects. The result is a small WSGI application that
serves the document as JSON at a path you choose.

## Installation

```
pip install oasroutes
```

## Building blocks

- `oasroutes.spec.Spec` holds the document-level data: `Info`, `tags`,
  `servers`, `external_docs`, `default_tags` and a list of `DefaultParameters`
  (parameters plus the named schemas they need).
- `oasroutes.models` has the document model: `OpenApi`, `Info`, `Tag`,
  `Server`, `ExternalDocumentation`, `PathItem`, `Operation`, `Parameter`,
  `RequestBody`, `Responses`, `Response`, `Header`, `MediaType`, `Components`,
  `Reference` and the enums `OperationType` and `ParameterIn`.
  `OpenApi.to_dict()` returns the document as JSON-ready data with camelCase
  keys. Empty optional members are left out.
- `oasroutes.route.api_operation(operation, components)` is a decorator. It
  attaches an `Operation` and its `Components` to a handler. Only handlers
  decorated this way are documented.
- `get()`, `put()`, `post()`, `patch()`, `delete()`, `options()`, `head()` and
  `method(name)` create a `Route`. `Route.to(handler)` binds a handler. A
  route made with `Route()` and no method is documented for GET, PUT, POST,
  DELETE, OPTIONS, HEAD and PATCH. An unknown method name is logged as a
  warning and is not documented.
- `oasroutes.resource.resource(path)` and `tagged_resource(path, tags)` group
  routes on one path. `Resource.to(handler)` documents the handler for all
  seven methods.
- `oasroutes.scope.scope(path)` and `tagged_scope(path, tags)` put resources,
  routes, redirects and nested scopes under a common prefix.
- `oasroutes.service_config.ServiceConfig` is the object passed to
  `configure` callbacks.
- `oasroutes.redirect.redirect(source, target)` (or `Redirect.to(target)` for
  `/`) describes a redirect. It is temporary by default. You can change this
  with `permanent()`, `temporary()`, `see_other()` or
  `using_status_code(code)`.
  - Temporary (307) and permanent (308) redirects are documented for all seven
    methods.
  - See-other (303) redirects are documented for GET only.
  - Other codes are not documented.
  - Each documented response has a `Location` header whose schema is the
    target.
- `oasroutes.responses` has `NoContent` (204), `CreatedJson` (201) and
  `AcceptedJson` (202).
  - `body` gives the serialised value.
  - `responses()` gives the `Responses` entry for the status. The JSON
    variants build it from their `schema` (a name and schema pair) or, failing
    that, their `raw_schema`.

## Example

```python
from oasroutes.app import document
from oasroutes.models import Info, Operation
from oasroutes.resource import resource
from oasroutes.route import api_operation, get, post
from oasroutes.scope import scope
from oasroutes.spec import Spec

spec = Spec(info=Info(title="A well documented API", version="1.0.0"))

@api_operation(Operation(tags=["todo"], summary="Get an element"), [])
def get_todo(environ, start_response):
    ...

@api_operation(Operation(tags=["todo"], summary="Add an element"), [])
def add_todo(environ, start_response):
    ...

app = document(spec).service(
    scope("/test").service(
        scope("/todo")
        .service(resource("/{todo_id}").route(get().to(get_todo)))
        .service(resource("").route(post().to(add_todo)))
    )
)

document_data = app.openapi().to_dict()
application = app.build("/openapi.json")
```

`App.openapi()` returns a copy of the document gathered so far.
`App.build(openapi_path)` returns an `OpenApiApplication`, which is a WSGI
callable.

## How the document is assembled

- Scope and resource paths are joined with `/`. Every top-level path gets a
  leading `/`.
- A patterned template such as `{pet_id:.+}` is written as `{pet_id}` in the
  document. Its pattern becomes the `pattern` of that path parameter's schema.
- An operation's path parameters are named, in order, after the placeholders
  in its path.
- An operation without an `operation_id` gets one from
  `oasroutes.app.build_operation_id(path, operation_type)`, for example
  `get_api-v1-plop-<md5 of the path>`.
- Tags from `tagged_resource` and `tagged_scope` are appended after the
  operation's own tags, innermost first.
- The spec's `default_tags` are appended to the document's operations each
  time a route or service is registered on the `App`.
- Default parameters are stored under `components.parameters` and their
  schemas under `components.schemas`, when the document has components. The
  first operation in the document receives `$ref` references to them.

## What the built application serves

`OpenApiApplication` answers only these requests:

- `GET` on the document path returns the JSON document. Any other method on
  that path gets `405`.
- A redirect registered directly on the `App`, by `service` or inside
  `configure`, is answered with its status code and a `Location` header.
- Any other request goes to the `default_service` when that is a callable WSGI
  application. Otherwise it gets `404`.

## What it does not do

The package documents routes; it does not dispatch them. Route handlers are
never called, and redirects nested inside scopes are not served. Guards,
middleware, app data, resource names and external resources are recorded on
their objects but have no effect on requests or on the document.