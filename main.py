from time import sleep, perf_counter
from itertools import count, islice

from lazymatch import match_on
from lazymatch.utils import setup_logging, measure_performance, get_performance_summary

logger = setup_logging()


def expensive_check(x):
    # Simulate a costly predicate so laziness is visible
    print(f"  checking {x} ...")
    sleep(0.2)
    return x % 3 == 0


print("\n--- Demo: laziness (no work until pulled) ---")
matcher = (
    match_on(range(1, 10_000))
    .arm(expensive_check, lambda x: f"fizz({x})")
    .arm(lambda x: x % 5 == 0, lambda x: f"buzz({x})")
)
print("Constructed matcher. Nothing checked yet.")
print("\nPulling 3 outputs (only the items needed are checked):")
t0 = perf_counter()
out = list(islice(matcher, 3))
t1 = perf_counter()
print(f"Result: {out}")
print(f"Time: {t1 - t0:.2f}s")
print(f"Stats: {matcher.stats().model_dump()}\n")

print("--- Demo: first matching arm wins ---")
ordered = (
    match_on(range(1, 11))
    .arm(lambda x: x % 2 == 0, lambda x: x * 2)
    .arm(lambda x: x % 2 != 0, lambda x: x * 3)
    .to_list()
)
print(f"even->x2 then odd->x3: {ordered}\n")

print("--- Demo: no default skips, default fills ---")
skipping = match_on(range(1, 11)).arm(lambda x: x % 2 == 0, lambda x: x * 2).to_list()
filled = match_on(range(1, 11)).arm(lambda x: x % 2 == 0, lambda x: x * 2).default(lambda: 0).to_list()
print(f"without default: {skipping}")
print(f"with default:    {filled}\n")

print("--- Demo: unbounded source with a default ---")
labels = match_on(count(1)).arm(lambda x: x % 15 == 0, lambda x: "fizzbuzz").default(lambda: "-")
print(f"First 15 labels: {list(islice(labels, 15))}\n")

print("--- Demo: measured run ---")
report = measure_performance(
    "match_100k",
    lambda: match_on(range(100_000)).arm(lambda x: x % 1000 == 0, lambda x: x // 1000).to_list(),
)
logger.info(f"{report.operation}: {report.execution_time_ms:.2f}ms, {report.result_size} results")
print(f"Summary: {get_performance_summary().model_dump()}")
