"""Duration conversions, a monotonic clock reading and a throughput timer."""