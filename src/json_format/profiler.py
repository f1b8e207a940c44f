"""Timing and memory profiler for codec operations."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Measurements for one read or write."""
    operation_name: str
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float

    @property
    def throughput_mbps(self) -> float:
        """Input megabytes processed per second."""
        if self.duration <= 0:
            return 0.0
        return self.input_size / 1024 / 1024 / self.duration


class PerformanceProfiler:
    """
    Records how long codec operations take and how much memory they hold.
    
    Wrap the operation in ``profile_operation`` and call ``record_output``
    with the size of the produced text before the block ends.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.
        
        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self._operation: Optional[str] = None
        self._started: Optional[float] = None
        self._memory_start = 0.0
        self._input_size = 0
        self._output_size = 0
    
    @property
    def current_operation(self) -> Optional[str]:
        """Name of the operation being profiled, if any."""
        return self._operation
    
    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Profile the enclosed block, even when it raises.
        
        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of the input text in bytes
        """
        self._operation = operation_name
        self._input_size = input_size
        self._output_size = 0
        self._memory_start = self._rss_mb()
        self._started = time.perf_counter()
        self.logger.debug(f"Started profiling: {operation_name}")
        try:
            yield self
        finally:
            self.stop_profiling()
    
    def record_output(self, output_size: int):
        """Set the size in bytes of the text the operation produced."""
        self._output_size = output_size
    
    def stop_profiling(self) -> PerformanceMetrics:
        """
        Close the active operation and log its metrics.
        
        Raises:
            ValueError: If no operation is being profiled
        """
        if self._operation is None or self._started is None:
            raise ValueError("No active profiling session")
        
        metrics = PerformanceMetrics(
            operation_name=self._operation,
            duration=time.perf_counter() - self._started,
            input_size=self._input_size,
            output_size=self._output_size,
            memory_start_mb=self._memory_start,
            memory_end_mb=self._rss_mb()
        )
        self.metrics_history.append(metrics)
        self._operation = None
        self._started = None
        
        self.logger.info(
            f"{metrics.operation_name}: {metrics.duration * 1000:.2f}ms, "
            f"{metrics.input_size} -> {metrics.output_size} bytes, "
            f"{metrics.throughput_mbps:.2f} MB/s, "
            f"RSS {metrics.memory_start_mb:.1f} -> {metrics.memory_end_mb:.1f} MB"
        )
        return metrics
    
    def get_performance_summary(self) -> Dict[str, Any]:
        """Totals over every profiled operation."""
        return {
            "total_operations": len(self.metrics_history),
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_output_bytes": sum(m.output_size for m in self.metrics_history),
            "operations": [m.operation_name for m in self.metrics_history],
        }
    
    def _rss_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0
