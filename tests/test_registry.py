"""Tests for the in-memory session registry."""

import asyncio
import pytest

from mcp_browser_lite.registry import SessionRegistry
from mcp_browser_lite.errors import (
    InstanceNotFoundError,
    NotFoundError,
    PageNotFoundError,
)


class TestSessionRegistry:

    def setup_method(self):
        self.registry = SessionRegistry()

    def test_register_returns_fresh_ids(self):
        ids = {self.registry.register(object()) for _ in range(50)}
        assert len(ids) == 50
        assert len(self.registry) == 50

    def test_lookup_instance(self):
        handle = object()
        bid = self.registry.register(handle)
        instance = self.registry.lookup_instance(bid)
        assert instance.id == bid
        assert instance.handle is handle
        assert instance.pages == {}

    def test_lookup_missing_instance(self):
        with pytest.raises(InstanceNotFoundError) as exc:
            self.registry.lookup_instance("nope")
        assert str(exc.value) == "Browser instance not found: nope"

    def test_lookup_page_distinguishes_missing_instance_and_missing_page(self):
        bid = self.registry.register(object())
        pid = self.registry.add_page(bid, object())

        assert self.registry.lookup_page(bid, pid).id == pid

        with pytest.raises(InstanceNotFoundError):
            self.registry.lookup_page("other", pid)

        with pytest.raises(PageNotFoundError) as exc:
            self.registry.lookup_page(bid, "missing-page")
        assert exc.value.instance_id == bid
        assert "Page not found: missing-page" in str(exc.value)

        # Both surface as "not found"
        assert issubclass(InstanceNotFoundError, NotFoundError)
        assert issubclass(PageNotFoundError, NotFoundError)

    def test_page_ids_unique_across_instances(self):
        page_ids = set()
        for _ in range(10):
            bid = self.registry.register(object())
            page_ids.add(self.registry.add_page(bid, object()))
        assert len(page_ids) == 10

    def test_page_belongs_to_one_instance(self):
        a = self.registry.register(object())
        b = self.registry.register(object())
        pid = self.registry.add_page(a, object())
        assert self.registry.lookup_page(a, pid).instance_id == a
        with pytest.raises(PageNotFoundError):
            self.registry.lookup_page(b, pid)

    def test_add_page_to_missing_instance(self):
        with pytest.raises(InstanceNotFoundError):
            self.registry.add_page("nope", object())

    def test_remove_is_idempotent(self):
        bid = self.registry.register(object())
        self.registry.remove(bid)
        assert bid not in self.registry
        self.registry.remove(bid)
        self.registry.remove("never-existed")
        assert len(self.registry) == 0

    def test_instances(self):
        a = self.registry.register(object())
        b = self.registry.register(object())
        pid = self.registry.add_page(b, object())

        instances = {i.id: i for i in self.registry.instances()}
        assert set(instances) == {a, b}
        assert list(instances[b].pages) == [pid]
        assert a in self.registry and "nope" not in self.registry

    def test_iteration_is_a_snapshot(self):
        ids = [self.registry.register(object()) for _ in range(3)]
        seen = []
        for bid in self.registry:
            seen.append(bid)
            self.registry.remove(bid)
        assert sorted(seen) == sorted(ids)
        assert len(self.registry) == 0


class TestPageLocking:

    def setup_method(self):
        self.registry = SessionRegistry()
        self.bid = self.registry.register(object())
        self.pid = self.registry.add_page(self.bid, object())

    def test_page_access_serializes_operations(self, event_loop):
        events = []

        async def op(name):
            async with self.registry.page_access(self.bid, self.pid):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        async def test_logic():
            await asyncio.gather(op("a"), op("b"))

        event_loop.run_until_complete(test_logic())
        assert events == ["a-start", "a-end", "b-start", "b-end"]

    def test_queued_operation_sees_removal(self, event_loop):
        async def holder():
            async with self.registry.instance_access(self.bid):
                await asyncio.sleep(0.01)
                self.registry.remove(self.bid)

        async def waiter():
            await asyncio.sleep(0)
            async with self.registry.page_access(self.bid, self.pid):
                pass

        async def test_logic():
            results = await asyncio.gather(holder(), waiter(), return_exceptions=True)
            assert results[0] is None
            assert isinstance(results[1], NotFoundError)

        event_loop.run_until_complete(test_logic())

    def test_instance_access_waits_for_page_operation(self, event_loop):
        events = []

        async def page_op():
            async with self.registry.page_access(self.bid, self.pid):
                events.append("page-start")
                await asyncio.sleep(0.01)
                events.append("page-end")

        async def close_op():
            await asyncio.sleep(0)
            async with self.registry.instance_access(self.bid):
                events.append("close")

        async def test_logic():
            await asyncio.gather(page_op(), close_op())

        event_loop.run_until_complete(test_logic())
        assert events == ["page-start", "page-end", "close"]

    def test_instance_access_missing(self, event_loop):
        async def test_logic():
            with pytest.raises(InstanceNotFoundError):
                async with self.registry.instance_access("nope"):
                    pass

        event_loop.run_until_complete(test_logic())
