"""In-place ascending sort for :class:`StringQueue.StringQueue`.

Nodes are never created or dropped, only relinked. Short queues are bubble
sorted; longer ones go through a trend pre-pass (a mostly descending queue is
reversed first) and a three-way partitioning quicksort that hands small
partitions back to bubble sort.

Ranges are half-open ``[begin, end)`` pairs of :class:`StringQueue.Slot`.
The node held by ``end`` when a call starts is the exclusive stop; it lies
outside the range, so it stays put while the range is rearranged.
"""
from __future__ import annotations

import logging
from collections import namedtuple
from typing import Callable, Optional, Tuple

from StringQueue import Node, Slot, StringQueue, compare

logger = logging.getLogger(__name__)

# Whole queues shorter than this are bubble sorted without a trend pre-pass.
BUBBLE_SORT_THRESHOLD = 10
# Quicksort partitions shorter than this are bubble sorted instead of split.
SMALL_RANGE_THRESHOLD = 5
# Pre-reverse when descending pairs exceed size / TREND_FACTOR.
TREND_FACTOR = 2

SortConfig = namedtuple(
    "SortConfig",
    ["bubble_sort_threshold", "small_range_threshold", "trend_factor"],
    defaults=[BUBBLE_SORT_THRESHOLD, SMALL_RANGE_THRESHOLD, TREND_FACTOR])

DEFAULT_CONFIG = SortConfig()

Compare = Callable[[str, str], int]


# ───────────────────────── swap ─────────────────────────

def swap(a: Slot, b: Slot) -> None:
    """Exchange the nodes held by slots ``a`` and ``b``."""
    a_node, b_node = a.get(), b.get()
    if a_node is b_node:
        return

    if a_node.next is b_node:
        a_node.next = b_node.next
        b_node.next = a_node
        a.set(b_node)
    elif b_node.next is a_node:
        b_node.next = a_node.next
        a_node.next = b_node
        b.set(a_node)
    else:
        a.set(b_node)
        b.set(a_node)
        a_node.next, b_node.next = b_node.next, a_node.next


# ───────────────────────── bubble sort ─────────────────────────

def bubble_sort(begin: Slot, end: Slot, cmp: Compare = compare) -> None:
    _bubble_sort(begin, end.get(), cmp)


def _bubble_sort(begin: Slot, stop: Optional[Node], cmp: Compare = compare) -> None:
    finished = stop
    while begin.get() is not finished:
        curr = begin
        while curr.get().next is not finished:
            node = curr.get()
            if cmp(node.value, node.next.value) > 0:
                swap(curr, Slot.after(node))
            curr = Slot.after(curr.get())
        # everything from here on is in its final place
        finished = curr.get()


# ───────────────────────── trend pre-pass ─────────────────────────

class Trend(namedtuple("Trend", ["ascending", "descending", "size"])):
    """Adjacent-pair counts from one scan; equal pairs count for neither."""
    __slots__ = ()

    def is_descending(self, trend_factor: int = TREND_FACTOR) -> bool:
        return (self.descending * trend_factor > self.size
                and self.descending > self.ascending)


def detect_trend(queue: StringQueue, cmp: Compare = compare) -> Trend:
    ascending = descending = 0
    node = queue.head()
    while node is not None and node.next is not None:
        c = cmp(node.value, node.next.value)
        if c < 0:
            ascending += 1
        elif c > 0:
            descending += 1
        node = node.next
    return Trend(ascending, descending, queue.size())


# ───────────────────────── quicksort ─────────────────────────

def _partition(begin: Slot, stop: Optional[Node], cmp: Compare
               ) -> Tuple[Node, int, Slot, int]:
    """Split ``[begin, stop)`` around its first node.

    The range is relinked as ``[less][equal..pivot][greater]``. Returns the
    first node of the equal run (the stop of the less run), the less count,
    the slot after the pivot (the start of the greater run) and the greater
    count.
    """
    pivot = begin.get()
    less_head: Optional[Node] = None
    less_tail: Optional[Node] = None
    equal_head = pivot
    n_less = n_greater = 0

    greater_start = Slot.after(pivot)
    greater_slot = greater_start

    node = pivot.next
    while node is not stop:
        nxt = node.next
        c = cmp(node.value, pivot.value)
        if c < 0:
            node.next = less_head
            if less_head is None:
                less_tail = node
            less_head = node
            n_less += 1
        elif c == 0:
            node.next = equal_head
            equal_head = node
        else:
            greater_slot.set(node)
            greater_slot = Slot.after(node)
            n_greater += 1
        node = nxt
    greater_slot.set(stop)

    if less_tail is not None:
        less_tail.next = equal_head
        begin.set(less_head)
    else:
        begin.set(equal_head)
    return equal_head, n_less, greater_start, n_greater


def _sort_run(begin: Slot, stop: Optional[Node], count: int,
              config: SortConfig, cmp: Compare) -> None:
    if count <= 1:
        return
    if count < config.small_range_threshold:
        _bubble_sort(begin, stop, cmp)
    else:
        _quicksort(begin, stop, config, cmp)


def _quicksort(begin: Slot, stop: Optional[Node], config: SortConfig,
               cmp: Compare) -> None:
    while True:
        first = begin.get()
        if first is stop or first.next is stop:
            return
        less_stop, n_less, greater_begin, n_greater = _partition(begin, stop, cmp)

        # recurse into the shorter run, loop on the longer one
        if n_less <= n_greater:
            _sort_run(begin, less_stop, n_less, config, cmp)
            begin, count = greater_begin, n_greater
        else:
            _sort_run(greater_begin, stop, n_greater, config, cmp)
            stop, count = less_stop, n_less

        if count < config.small_range_threshold:
            if count > 1:
                _bubble_sort(begin, stop, cmp)
            return


def quicksort(begin: Slot, end: Slot, config: Optional[SortConfig] = None,
              cmp: Compare = compare) -> None:
    _quicksort(begin, end.get(), config or DEFAULT_CONFIG, cmp)


# ───────────────────────── entry ─────────────────────────

def sort(queue: Optional[StringQueue], config: Optional[SortConfig] = None) -> None:
    """Sort ``queue`` ascending in place; ``None`` and size <= 1 are no-ops."""
    if queue is None or queue.size() <= 1:
        return
    config = config or DEFAULT_CONFIG
    head = queue.head_slot()
    size = queue.size()

    if size < config.bubble_sort_threshold:
        logger.debug("bubble sorting %d values", size)
        _bubble_sort(head, None)
    else:
        trend = detect_trend(queue)
        logger.debug("trend over %d values: %d ascending, %d descending",
                      size, trend.ascending, trend.descending)
        if trend.is_descending(config.trend_factor):
            logger.debug("reversing descending-dominant queue before sorting")
            queue.reverse()
        _quicksort(head, None, config, compare)

    queue.recompute_tail()
