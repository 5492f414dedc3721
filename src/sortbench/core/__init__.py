"""core - constants, step counters, result storage and benchmark inputs."""
