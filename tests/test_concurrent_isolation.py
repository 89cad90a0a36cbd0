# tests/test_concurrent_isolation.py
"""
Test: Concurrent chain construction

Error chains are immutable values, so threads building, walking and
formatting chains at the same time never see each other's nodes or stacks.
"""

from concurrent.futures import ThreadPoolExecutor

import failchain


def build_chain(i):
    """Build a three-level chain rooted at a worker-specific error."""
    origin = failchain.new(f"failure {i}")
    err = failchain.wrap(origin, f"step {i}")
    err = failchain.with_message(err, f"job {i}")
    err = failchain.wrap(err, f"batch {i}")
    return origin, err


def test_concurrent_chains_stay_isolated():
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(build_chain, range(200)))

    for i, (origin, err) in enumerate(results):
        assert str(err) == f"batch {i}: job {i}: step {i}: failure {i}"
        assert failchain.cause(err) is origin
        assert failchain.stack_trace_of(err) is origin.stack_trace()
        assert origin.stack_trace()[0].name == "build_chain"


def test_shared_chain_read_concurrently():
    """
    Test: one chain formatted from many threads renders identically everywhere
    """
    origin, err = build_chain(0)
    expected = format(err, "+v")

    with ThreadPoolExecutor(max_workers=8) as pool:
        rendered = list(pool.map(lambda _: format(err, "+v"), range(100)))
        roots = list(pool.map(lambda _: failchain.cause(err), range(100)))

    assert all(text == expected for text in rendered)
    assert all(root is origin for root in roots)


def test_get_config_is_shared_without_loading():
    """
    Test: concurrent first reads of the configuration all see the same default object
    """
    from failchain.config import FailChainConfig, get_config

    with ThreadPoolExecutor(max_workers=8) as pool:
        configs = list(pool.map(lambda _: get_config(), range(100)))

    assert all(config is configs[0] for config in configs)
    assert configs[0].to_dict() == FailChainConfig.default().to_dict()
