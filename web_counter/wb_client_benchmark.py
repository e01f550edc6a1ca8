import re
import sys
import time
from concurrent.futures import ThreadPoolExecutor

import requests

_COUNT = re.compile(r"<p>Count = ([0-9]+)</p>")


def parse_count(html: str) -> int:
    m = _COUNT.search(html)
    if m is None:
        raise ValueError("no count in page")
    return int(m.group(1))


def worker(base: str, n: int):
    s = requests.Session()
    for _ in range(n):
        r = s.post(
            f"{base}/count-up",
            data="diff=1",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        r.raise_for_status()


def get_count(base: str) -> int:
    r = requests.get(f"{base}/")
    r.raise_for_status()
    return parse_count(r.text)


def main(argv=None):
    argv = sys.argv if argv is None else argv
    base = argv[1] if len(argv) > 1 else "http://127.0.0.1:3000"
    clients = int(argv[2]) if len(argv) > 2 else 1
    n = int(argv[3]) if len(argv) > 3 else 10_000

    before = get_count(base)
    t0 = time.perf_counter()

    with ThreadPoolExecutor(max_workers=clients) as ex:
        futures = [ex.submit(worker, base, n) for _ in range(clients)]
        for f in futures:
            f.result()

    dt = time.perf_counter() - t0
    after = get_count(base)

    total = clients * n
    expected = before + total
    rps = total / dt if dt > 0 else float("inf")

    print(f"clients={clients} calls_per_client={n} total_calls={total}")
    print(f"time_sec={dt:.6f} rps={rps:.2f}")
    print(f"count_before={before} count_after={after} expected={expected} ok={after==expected}")
    return after == expected


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
