"""Unit tests for the order id generator."""

import threading

from storefront.domain.service.order_numbering import OrderIdGenerator


class TestOrderIdGenerator:

    def test_starts_at_one(self):
        assert OrderIdGenerator().next_id() == 1

    def test_custom_start(self):
        assert OrderIdGenerator(start=100).next_id() == 100

    def test_sequential(self):
        ids = OrderIdGenerator()
        assert [ids.next_id() for _ in range(3)] == [1, 2, 3]

    def test_generators_are_independent(self):
        a, b = OrderIdGenerator(), OrderIdGenerator()
        a.next_id()
        a.next_id()
        assert b.next_id() == 1

    def test_unique_across_threads(self):
        ids = OrderIdGenerator()
        seen: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(200):
                order_id = ids.next_id()
                with lock:
                    seen.append(order_id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(seen) == list(range(1, 1601))
