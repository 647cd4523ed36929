from oasroutes.models import Operation, Parameter, ParameterIn, Reference
from oasroutes.utils import update_path_parameter_name_from_path


def _path_param():
    return Parameter(name="", location=ParameterIn.PATH)


def test_simple_path_parameter_name_replacement():
    operation = Operation(parameters=[_path_param()])
    update_path_parameter_name_from_path(operation, "/test/{plop_id}/plop")
    assert operation.parameters[0].name == "plop_id"


def test_multiple_path_parameter_name_replacement():
    operation = Operation(parameters=[_path_param(), _path_param()])
    update_path_parameter_name_from_path(operation, "/test/{plop_id}/plop/{clap_id}")
    assert operation.parameters[0].name == "plop_id"
    assert operation.parameters[-1].name == "clap_id"


def test_regex_path_parameter_name_replacement():
    operation = Operation(parameters=[_path_param()])
    update_path_parameter_name_from_path(operation, "/test/{plop_id:.+}/plop")
    param = operation.parameters[0]
    assert param.name == "plop_id"
    assert param.schema["pattern"] == ".+"


def test_non_path_parameters_untouched():
    query = Parameter(name="q", location=ParameterIn.QUERY)
    ref = Reference("#/components/parameters/X")
    path = _path_param()
    operation = Operation(parameters=[query, ref, path])
    update_path_parameter_name_from_path(operation, "/a/{id}")
    assert query.name == "q"
    assert operation.parameters[1] == ref
    assert path.name == "id"


def test_more_parameters_than_templates():
    first, second = _path_param(), _path_param()
    operation = Operation(parameters=[first, second])
    update_path_parameter_name_from_path(operation, "/a/{only}")
    assert first.name == "only"
    assert second.name == ""


def test_path_without_templates_leaves_names():
    param = Parameter(name="keep", location=ParameterIn.PATH)
    operation = Operation(parameters=[param])
    update_path_parameter_name_from_path(operation, "/plain/path")
    assert param.name == "keep"