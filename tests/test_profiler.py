"""Tests for the performance profiler."""

import logging
import pytest
from json_format.profiler import PerformanceMetrics, PerformanceProfiler


class TestPerformanceProfiler:
    """Tests for PerformanceProfiler class."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = PerformanceProfiler()
    
    def test_profile_operation_records_metrics(self):
        with self.profiler.profile_operation("encode", input_size=2048) as profiler:
            assert profiler.current_operation == "encode"
            profiler.record_output(1024)
        
        assert len(self.profiler.metrics_history) == 1
        metrics = self.profiler.metrics_history[0]
        assert metrics.operation_name == "encode"
        assert metrics.input_size == 2048
        assert metrics.output_size == 1024
        assert metrics.duration >= 0
        assert metrics.memory_start_mb > 0
        assert self.profiler.current_operation is None
    
    def test_profile_operation_stops_on_error(self):
        with pytest.raises(RuntimeError):
            with self.profiler.profile_operation("decode"):
                raise RuntimeError("boom")
        
        assert len(self.profiler.metrics_history) == 1
        assert self.profiler.metrics_history[0].output_size == 0
        assert self.profiler.current_operation is None
    
    def test_stop_without_start(self):
        with pytest.raises(ValueError, match="No active profiling session"):
            self.profiler.stop_profiling()
    
    def test_metrics_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="json_format.profiler"):
            with self.profiler.profile_operation("encode", 10) as profiler:
                profiler.record_output(4)
        
        assert any(record.getMessage().startswith("encode:") and "10 -> 4 bytes" in record.getMessage()
                   for record in caplog.records)
    
    def test_throughput(self):
        metrics = PerformanceMetrics("read", 2.0, 4 * 1024 * 1024, 0, 1.0, 1.0)
        assert metrics.throughput_mbps == 2.0
        
        instant = PerformanceMetrics("read", 0.0, 100, 0, 1.0, 1.0)
        assert instant.throughput_mbps == 0.0
    
    def test_empty_summary(self):
        summary = self.profiler.get_performance_summary()
        
        assert summary["total_operations"] == 0
        assert summary["operations"] == []
    
    def test_summary(self):
        for name in ("encode", "decode"):
            with self.profiler.profile_operation(name, 100) as profiler:
                profiler.record_output(50)
        
        summary = self.profiler.get_performance_summary()
        
        assert summary["total_operations"] == 2
        assert summary["total_input_bytes"] == 200
        assert summary["total_output_bytes"] == 100
        assert summary["operations"] == ["encode", "decode"]
