import logging
import sys

from StringQueue import StringQueue
import QueueSort

DELIM = "&-=-&"


def print_section(name: str):
    print(f"{DELIM} {name}")


def print_queue(q: "StringQueue", label: str = ""):
    if label:
        print(f"{label}: ", end="")
    vs = q.to_list()
    print(f"[{' '.join(vs)}] size={q.size()}")


# ───────────────────────── tasks ─────────────────────────

def task1_basic_ops():
    print_section("start-task1")

    q = StringQueue()
    print_section("empty-queue")
    print(f"empty={q.empty()} size={q.size()}")

    print_section("insert_head_tail")
    q.insert_head("dolphin")
    q.insert_tail("gerbil")
    q.insert_head("bear")
    print_queue(q, "after-insert")

    print_section("front_back")
    print(f"front={q.front()} back={q.back()}")

    print_section("remove_head")
    ok, out = q.remove_head(bufsize=3)
    print(f"ok={ok} removed={out if ok else 'N/A'}")
    print_queue(q, "after-remove")

    print_section("clear")
    q.clear()
    ok, _ = q.remove_head()
    print(f"empty={q.empty()} size={q.size()} remove-ok={ok}")


def task2_reverse():
    print_section("start-task2")

    q = StringQueue(["a", "b", "c", "d", "e"])
    print_queue(q, "seed")

    print_section("reverse")
    q.reverse()
    print_queue(q, "after-reverse")
    print(f"front={q.front()} back={q.back()}")

    print_section("reverse-single")
    one = StringQueue(["x"])
    one.reverse()
    print_queue(one, "single")


def task3_sort():
    print_section("start-task3")

    print_section("sort-small")
    q = StringQueue(["d", "b", "a", "c"])
    QueueSort.sort(q)
    print_queue(q, "sorted")

    print_section("sort-duplicates")
    q = StringQueue(["b", "b", "a"])
    QueueSort.sort(q)
    print_queue(q, "sorted")

    print_section("sort-empty")
    q = StringQueue()
    QueueSort.sort(q)
    print(f"head={q.head()} tail={q.tail()} size={q.size()}")

    print_section("sort-single")
    q = StringQueue(["x"])
    QueueSort.sort(q)
    print_queue(q, "sorted")

    print_section("sort-descending")
    q = StringQueue([f"v{i:02d}" for i in range(20, 0, -1)])
    trend = QueueSort.detect_trend(q)
    print(f"ascending={trend.ascending} descending={trend.descending} "
          f"reverse={trend.is_descending()}")
    QueueSort.sort(q)
    print_queue(q, "sorted")
    print(f"back={q.back()}")


# ───────────────────────── entry ─────────────────────────

def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if "-v" in args:
        args.remove("-v")
        logging.basicConfig(level=logging.DEBUG,
                            format="%(name)s %(levelname)s %(message)s")
    which = args[0] if args else ""
    if which == "task1":
        task1_basic_ops(); return 0
    if which == "task2":
        task2_reverse(); return 0
    if which == "task3":
        task3_sort(); return 0
    # default: run all
    task1_basic_ops()
    task2_reverse()
    task3_sort()
    return 0


if __name__ == "__main__":
    sys.exit(main())
