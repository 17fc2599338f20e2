import random

import pytest

from algolab.sorting import (
    bubble_sort,
    insertion_sort,
    is_in_order,
    main,
    quick_sort,
    render_array,
    selection_sort,
)

SAMPLES = [
    [],
    [1],
    [2, 1],
    [3, 3, 3],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [44, 666, 27, 102, 58, 90, 30, 63, 24, 11, 2],
    [7, -2, 7, 0, -2, 9, 1],
]


def _random_samples():
    rng = random.Random(11)
    return [[rng.randint(0, 50) for _ in range(rng.randint(0, 60))] for _ in range(10)]


ALL_SAMPLES = SAMPLES + _random_samples()


@pytest.mark.parametrize("algorithm", [bubble_sort, insertion_sort, quick_sort])
@pytest.mark.parametrize("values", ALL_SAMPLES)
def test_ascending_sorts_match_sorted(algorithm, values):
    data = list(values)
    algorithm(data)
    assert data == sorted(values)
    assert is_in_order(data)


@pytest.mark.parametrize("values", ALL_SAMPLES)
def test_selection_sort_puts_largest_first(values):
    data = list(values)
    selection_sort(data)
    assert data == sorted(values, reverse=True)


def test_quick_sort_large_sorted_input():
    data = list(range(3000))
    quick_sort(data)
    assert data == list(range(3000))


def test_is_in_order_true_cases():
    assert is_in_order([])
    assert is_in_order([4])
    assert is_in_order([1, 1, 2, 9])


def test_is_in_order_false_case():
    assert not is_in_order([1, 3, 2])


def test_render_array_numbers_from_one():
    assert render_array([10, 20]) == "Array[1] ....: 10 \nArray[2] ....: 20 \n"


def test_render_array_empty():
    assert render_array([]) == ""


def test_main_quick_sort_output(capsys):
    assert main(["--seed", "7"]) == 0
    output = capsys.readouterr().out
    before, after = output.split("\n******Random Array - AFTER SORT******\n")
    assert before.startswith("******Random Array - BEFORE SORT******\n")
    assert after.endswith("Random Array is SORTED :)")
    lines = [line for line in after.splitlines() if line.startswith("Array[")]
    assert len(lines) == 100
    numbers = [int(line.split(":")[1]) for line in lines]
    assert numbers == sorted(numbers)


@pytest.mark.parametrize("algorithm", ["bubble", "insertion", "quick"])
def test_main_other_algorithms_sort(capsys, algorithm):
    main(["--seed", "3", "--size", "20", "--algorithm", algorithm])
    output = capsys.readouterr().out
    assert output.endswith("Random Array is SORTED :)")


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-1"])