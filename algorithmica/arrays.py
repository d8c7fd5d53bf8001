"""Array puzzles: sums, jumps, spans, scheduling and water."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from functools import lru_cache
from heapq import heappop, heappush, heapreplace
from itertools import accumulate

_LAST_MINUTE = 2359


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct triplet, in ascending order, that sums to zero."""
    items = sorted(nums)
    size = len(items)
    result: list[list[int]] = []
    for i in range(size - 2):
        first = items[i]
        if first > 0:
            break
        if i > 0 and first == items[i - 1]:
            continue
        low, high = i + 1, size - 1
        while low < high:
            total = first + items[low] + items[high]
            if total < 0:
                low += 1
            elif total > 0:
                high -= 1
            else:
                result.append([first, items[low], items[high]])
                high -= 1
                while low < high and items[high] == items[high + 1]:
                    high -= 1
                low += 1
                while low < high and items[low] == items[low - 1]:
                    low += 1
    return result


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps from the first index to the last.

    Each item is the longest jump allowed from its position. Raises
    ValueError when the last index cannot be reached.
    """
    last = len(nums) - 1
    reach = frontier = jumps = 0
    for index, step in enumerate(nums[:-1]):
        reach = max(reach, index + step)
        if reach >= last:
            return jumps + 1
        if index == frontier:
            if reach == frontier:
                raise ValueError("the last index cannot be reached")
            frontier = reach
            jumps += 1
    return jumps


def minimum_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Platforms needed so that no train waits.

    Times are 24-hour clock values from 0 to 2359; a train holds its
    platform up to and including its departure time.
    """
    arrivals = list(arrivals)
    departures = list(departures)
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    changes = [0] * (_LAST_MINUTE + 2)
    for arrival, departure in zip(arrivals, departures):
        if not 0 <= arrival <= departure <= _LAST_MINUTE:
            raise ValueError(
                f"invalid stay from {arrival} to {departure}: times run from 0 "
                f"to {_LAST_MINUTE} and a train cannot leave before it arrives"
            )
        changes[arrival] += 1
        changes[departure + 1] -= 1
    return max(1, max(accumulate(changes)))


def stock_span(prices: Iterable[float]) -> list[int]:
    """For each day, count consecutive days up to it with a price not above it."""
    prices = list(prices)
    spans: list[int] = []
    for index, price in enumerate(prices):
        span = 1
        while index - span >= 0 and price >= prices[index - span]:
            span += spans[index - span]
        spans.append(span)
    return spans


def avoid_flood(rains: Iterable[int]) -> list[int]:
    """Plan which lake to dry on each dry day so that no lake floods.

    A positive item means it rains on that lake that day; zero is a dry day.
    The plan holds -1 for rainy days and the lake to dry otherwise. An empty
    list is returned when a flood cannot be avoided.
    """
    rains = list(rains)
    upcoming: defaultdict[int, deque[int]] = defaultdict(deque)
    for day, lake in enumerate(rains):
        if lake:
            upcoming[lake].append(day)
    deadlines: list[int] = []
    plan: list[int] = []
    for day, lake in enumerate(rains):
        if lake:
            days = upcoming[lake]
            days.popleft()
            if days:
                heappush(deadlines, days[0])
            plan.append(-1)
        elif deadlines:
            deadline = heappop(deadlines)
            if deadline < day:
                return []
            plan.append(rains[deadline])
        else:
            plan.append(1)
    return [] if deadlines else plan


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Index of the furthest building reachable with the bricks and ladders.

    Ladders are kept for the largest climbs; bricks pay for the rest.
    """
    if bricks < 0 or ladders < 0:
        raise ValueError("bricks and ladders must not be negative")
    last = len(heights) - 1
    if last <= 0:
        return 0
    climbs: list[int] = []
    index = 0
    while len(climbs) < ladders and index < last:
        diff = heights[index + 1] - heights[index]
        if diff > 0:
            heappush(climbs, diff)
        index += 1
    while index < last:
        diff = heights[index + 1] - heights[index]
        if diff > 0:
            if climbs and climbs[0] < diff:
                bricks -= heapreplace(climbs, diff)
            else:
                bricks -= diff
        if bricks < 0:
            return index
        index += 1
    return index


def trap_rain_water(heights: Sequence[int]) -> int:
    """Units of water held between the bars of an elevation map."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                water += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                water += max_right - heights[right]
            right -= 1
    return water


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices of the first pair adding up to target, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items, each taken at most once, within capacity."""
    weights = tuple(weights)
    values = tuple(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight = weights[count - 1]
        without = best(count - 1, room)
        if weight > room:
            return without
        return max(values[count - 1] + best(count - 1, room - weight), without)

    return best(len(weights), capacity)