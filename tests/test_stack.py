from behavioral.stack import Stack


def test_push_pop_follow_lifo_order():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    stack.push(3)

    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.last_element() == 1
    assert len(stack) == 1


def test_pop_and_last_element_on_empty_stack_return_none():
    stack = Stack()
    assert stack.is_empty
    assert stack.pop() is None
    assert stack.last_element() is None


def test_iteration_goes_top_to_bottom_without_consuming():
    stack = Stack([5, 2, 3, 1, 5, 4])

    assert list(stack) == [4, 5, 1, 3, 2, 5]
    assert list(stack) == [4, 5, 1, 3, 2, 5]
    assert len(stack) == 6


def test_iteration_uses_snapshot():
    stack = Stack(["a", "b"])
    seen = []
    for element in stack:
        seen.append(element)
        stack.push("c")

    assert seen == ["b", "a"]
    assert len(stack) == 4


def test_drain_pops_until_empty():
    stack = Stack([2.2, 2.5, 2.7])

    assert list(stack.drain()) == [2.7, 2.5, 2.2]
    assert stack.is_empty


def test_initial_elements_are_copied():
    elements = [1, 2]
    stack = Stack(elements)
    stack.push(3)
    assert elements == [1, 2]


def test_str_lists_elements_from_top():
    assert str(Stack([1, 2, 3])) == "StackTop\n3\n2\n1\nStackBot\n"
    assert str(Stack()) == "StackTop\n\nStackBot\n"
