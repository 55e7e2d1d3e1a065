import pytest

from kata.containers import (
    EmptyCollectionError,
    HashSet,
    Pair,
    Queue,
    Stack,
    contains,
    difference,
    filter_items,
    find_index,
    intersection,
    map_items,
    reduce_items,
    remove_duplicates,
    union,
)


def _set_of(*values):
    result = HashSet()
    for value in values:
        result.add(value)
    return result


def test_pair_holds_values():
    pair = Pair("hello", 42)
    assert pair.first == "hello"
    assert pair.second == 42


def test_pair_swap():
    swapped = Pair("hello", 42).swap()
    assert swapped.first == 42
    assert swapped.second == "hello"


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_stack_push():
    stack = Stack()
    stack.push(1)
    assert not stack.is_empty()
    assert len(stack) == 1


def test_stack_peek():
    stack = Stack()
    with pytest.raises(EmptyCollectionError):
        stack.peek()
    stack.push(1)
    stack.push(2)
    assert stack.peek() == 2
    assert len(stack) == 2


def test_stack_pop():
    stack = Stack()
    with pytest.raises(EmptyCollectionError):
        stack.pop()
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    assert len(stack) == 1
    assert stack.pop() == 1
    assert stack.is_empty()


def test_empty_error_message():
    with pytest.raises(EmptyCollectionError, match="collection is empty"):
        Queue().dequeue()


def test_new_queue_is_empty():
    queue = Queue()
    assert queue.is_empty()
    assert len(queue) == 0


def test_queue_enqueue():
    queue = Queue()
    queue.enqueue("first")
    assert not queue.is_empty()
    assert len(queue) == 1


def test_queue_front():
    queue = Queue()
    with pytest.raises(EmptyCollectionError):
        queue.front()
    queue.enqueue("first")
    queue.enqueue("second")
    assert queue.front() == "first"
    assert len(queue) == 2


def test_queue_dequeue():
    queue = Queue()
    with pytest.raises(EmptyCollectionError):
        queue.dequeue()
    queue.enqueue("first")
    queue.enqueue("second")
    assert queue.dequeue() == "first"
    assert len(queue) == 1
    assert queue.dequeue() == "second"
    assert queue.is_empty()


def test_new_set_is_empty():
    assert len(HashSet()) == 0


def test_set_add():
    s = HashSet()
    s.add(1)
    assert s.contains(1)
    assert len(s) == 1
    s.add(1)
    assert len(s) == 1
    s.add(2)
    assert s.contains(2)
    assert len(s) == 2


def test_set_remove():
    s = _set_of(1, 2, 3)
    s.remove(2)
    assert not s.contains(2)
    assert len(s) == 2
    s.remove(4)
    assert len(s) == 2


def test_set_elements():
    assert HashSet().elements() == []
    assert sorted(_set_of(1, 2, 3).elements()) == [1, 2, 3]


def test_union():
    result = union(_set_of(1, 2, 3), _set_of(3, 4, 5))
    assert len(result) == 5
    assert all(result.contains(i) for i in range(1, 6))


def test_intersection():
    result = intersection(_set_of(1, 2, 3), _set_of(3, 4, 5))
    assert len(result) == 1
    assert result.contains(3)


def test_difference():
    result = difference(_set_of(1, 2, 3), _set_of(3, 4, 5))
    assert len(result) == 2
    assert result.contains(1) and result.contains(2)
    assert not result.contains(3)


def test_filter_items():
    assert filter_items([1, 2, 3, 4, 5, 6, 7, 8], lambda n: n % 2 == 0) == [2, 4, 6, 8]
    assert filter_items([], lambda n: True) == []


def test_map_items():
    assert map_items([1, 2, 3, 4], lambda n: n * n) == [1, 4, 9, 16]
    assert map_items([1, 2, 3, 4], str) == ["1", "2", "3", "4"]
    assert map_items([], lambda n: n * 2) == []


def test_reduce_items():
    numbers = [1, 2, 3, 4, 5]
    assert reduce_items(numbers, 0, lambda acc, n: acc + n) == 15
    assert reduce_items(numbers, 1, lambda acc, n: acc * n) == 120
    assert reduce_items([], 42, lambda acc, n: acc + n) == 42


def test_contains():
    numbers = [1, 2, 3, 4, 5]
    assert contains(numbers, 3)
    assert not contains(numbers, 6)
    assert not contains([], 1)


def test_find_index():
    numbers = [1, 2, 3, 4, 5]
    assert find_index(numbers, 3) == 2
    assert find_index(numbers, 6) == -1
    assert find_index([], 1) == -1


def test_remove_duplicates():
    assert remove_duplicates([1, 2, 2, 3, 1, 4, 5, 5]) == [1, 2, 3, 4, 5]
    assert remove_duplicates([1, 2, 3, 4, 5]) == [1, 2, 3, 4, 5]
    assert remove_duplicates([]) == []