import pytest

from algorithmica.arrays import (
    avoid_flood,
    furthest_building,
    knapsack,
    min_jumps,
    minimum_platforms,
    stock_span,
    three_sum,
    trap_rain_water,
    two_sum,
)


def test_three_sum_triplets_are_sorted_unique_and_sum_to_zero():
    nums = [-1, 0, 1, 2, -1, -4]
    result = three_sum(nums)
    assert result
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
    assert len({tuple(t) for t in result}) == len(result)


def test_three_sum_does_not_change_input():
    nums = [3, -3, 0, 2, -2]
    copy = list(nums)
    three_sum(nums)
    assert nums == copy


def test_three_sum_positive_numbers_have_no_triplet():
    assert three_sum([1, 2, 3, 4]) == []


def test_min_jumps_all_ones_needs_one_jump_per_step():
    nums = [1] * 6
    assert min_jumps(nums) == len(nums) - 1


def test_min_jumps_single_big_first_jump():
    size = 7
    nums = [size - 1] + [0] * (size - 1)
    assert min_jumps(nums) == min_jumps([1, 0])


def test_min_jumps_unreachable_raises():
    with pytest.raises(ValueError):
        min_jumps([0, 1])


def test_minimum_platforms_worked_example():
    arrivals = [900, 940, 950, 1100, 1500, 1800]
    departures = [910, 1200, 1120, 1130, 1900, 2000]
    assert minimum_platforms(arrivals, departures) == 3


def test_minimum_platforms_identical_trains_need_one_each():
    arrivals = [900] * 4
    departures = [1000] * 4
    assert minimum_platforms(arrivals, departures) == len(arrivals)


def test_minimum_platforms_disjoint_trains_share_one():
    assert minimum_platforms([100, 300, 500], [200, 400, 600]) == minimum_platforms([100], [200])


def test_minimum_platforms_rejects_bad_input():
    with pytest.raises(ValueError):
        minimum_platforms([900], [800])
    with pytest.raises(ValueError):
        minimum_platforms([900, 1000], [950])
    with pytest.raises(ValueError):
        minimum_platforms([900], [2400])


def test_stock_span_worked_example():
    assert stock_span([10, 4, 5, 90, 120, 80]) == [1, 1, 2, 4, 5, 1]


def test_stock_span_increasing_prices():
    prices = [1, 2, 3, 4, 5]
    assert stock_span(prices) == list(range(1, len(prices) + 1))


def test_stock_span_bounds():
    spans = stock_span([7, 3, 9, 1, 1, 8])
    for index, span in enumerate(spans):
        assert 1 <= span <= index + 1


def _floods(rains, plan):
    full = set()
    for lake, action in zip(rains, plan):
        if lake:
            if lake in full:
                return True
            full.add(lake)
        else:
            full.discard(action)
    return False


def test_avoid_flood_plan_is_valid():
    rains = [1, 2, 0, 0, 2, 1]
    plan = avoid_flood(rains)
    assert len(plan) == len(rains)
    assert all((action == -1) == bool(lake) for lake, action in zip(rains, plan))
    assert not _floods(rains, plan)


def test_avoid_flood_impossible_gives_empty_plan():
    assert avoid_flood([1, 2, 0, 1, 2]) == []


def test_furthest_building_enough_bricks_reaches_end():
    heights = [4, 2, 7, 6, 9, 14, 12]
    climbs = sum(max(b - a, 0) for a, b in zip(heights, heights[1:]))
    assert furthest_building(heights, climbs, 0) == len(heights) - 1


def test_furthest_building_enough_ladders_reaches_end():
    heights = [1, 5, 2, 8, 3, 9]
    assert furthest_building(heights, 0, len(heights)) == len(heights) - 1


def test_furthest_building_stops_before_first_climb():
    heights = [5, 4, 3, 10, 2]
    assert furthest_building(heights, 0, 0) == heights.index(10) - 1


def test_trap_rain_water_valley():
    assert trap_rain_water([3, 0, 3]) == 3


def test_trap_rain_water_symmetric_and_monotonic():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trap_rain_water(heights) == trap_rain_water(heights[::-1])
    assert trap_rain_water(sorted(heights)) == trap_rain_water([])


def test_two_sum_finds_pair():
    nums = [2, 7, 11, 15]
    target = 26
    first, second = two_sum(nums, target)
    assert first < second
    assert nums[first] + nums[second] == target


def test_two_sum_without_pair():
    assert two_sum([1, 2, 3], 100) is None


def test_knapsack_worked_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_everything_fits():
    weights = [3, 4, 5]
    values = [10, 20, 30]
    assert knapsack(sum(weights), weights, values) == sum(values)


def test_knapsack_monotonic_in_capacity():
    weights = [5, 3, 8, 2]
    values = [9, 4, 12, 3]
    results = [knapsack(c, weights, values) for c in range(20)]
    assert results == sorted(results)


def test_knapsack_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])