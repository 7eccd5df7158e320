from kokiri.functions import FunctionType


def test_stages_are_declared_in_loop_order():
    names = [FunctionType(member.value).name for member in FunctionType]
    assert names == ["RENDER", "UPDATE", "EVENT"]


def test_lookup_by_name_and_value_round_trips():
    for member in FunctionType:
        assert FunctionType[member.name] is member
        assert FunctionType(member.value) is member


def test_members_work_as_callback_keys():
    bindings = {
        FunctionType["EVENT"]: "event handler",
        FunctionType["RENDER"]: "render handler",
    }
    assert bindings[FunctionType(FunctionType.EVENT.value)] == "event handler"
    assert bindings[FunctionType(FunctionType.RENDER.value)] == "render handler"
    assert FunctionType["UPDATE"] not in bindings
    assert sorted(member.name for member in bindings) == ["EVENT", "RENDER"]