from pushswap.errors import PushSwapError, StackError


def test_message_is_always_error():
    err = PushSwapError("number out of range")
    assert str(err) == "Error"
    assert err.detail == "number out of range"


def test_default_detail_is_empty():
    assert PushSwapError().detail == ""


def test_stack_error_is_a_push_swap_error():
    err = StackError("pop from empty stack")
    assert isinstance(err, PushSwapError)
    assert str(err) == "Error"
    assert err.detail == "pop from empty stack"


def test_stack_error_message():
    assert str(StackError()) == "Error"