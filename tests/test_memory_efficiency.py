import pytest
import gc
import tracemalloc
from itermap import itermap


class TestMemoryEfficiency:
    """Test memory efficiency of lazy evaluation"""

    def test_memory_scales_with_output_not_input(self):
        """Test that memory usage scales with output size, not input size"""
        large_input_size = 200000

        gc.collect()
        tracemalloc.start()
        baseline = tracemalloc.get_traced_memory()[0]

        result = (
            itermap((i, i * i) for i in range(large_input_size))
            .filter_keys(lambda k: k % 1000 == 0)
            .map_values(lambda v: v // 2)
            .swap()
            .to_list()
        )

        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        memory_used = peak - baseline

        assert len(result) == large_input_size // 1000, f"Expected {large_input_size // 1000} results"
        # Materialising 200k pairs would take well over 10MB
        assert memory_used < 5000000, f"Used too much memory: {memory_used} bytes"

    def test_no_intermediate_collection_storage(self):
        """Test that mapped values are not kept once pulled"""
        def memory_intensive_operation(v):
            return [v] * 1000

        gc.collect()
        tracemalloc.start()
        baseline = tracemalloc.get_traced_memory()[0]

        total = 0
        for key, block in itermap((i, i) for i in range(500)).map_values(memory_intensive_operation):
            total += len(block)

        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        memory_used = peak - baseline

        assert total == 500 * 1000
        # 500 blocks of 1000 pointers held at once would be ~4MB
        assert memory_used < 1000000, f"Used too much memory: {memory_used} bytes"
