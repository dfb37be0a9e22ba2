"""
Microbenchmark: restart write/read time vs number of particles.
Run:
  python benchmarks/bench_restart.py
"""
import tempfile
import time
import numpy as np
from sim_checkpoint import IOEnvironment, SimulationSystem, ParticleBody, RestartIO

def run(n: int, repeats: int = 5):
    with tempfile.TemporaryDirectory() as root:
        env = IOEnvironment.from_root(root)
        env.ensure_folders()
        system = SimulationSystem(io_environment=env, physical_time=0.5)

        rng = np.random.default_rng(12345)
        body = ParticleBody("Fluid", position=rng.random((n, 3)))
        body.add_variable("Velocity", rng.normal(size=(n, 3)))
        body.add_variable("Volume", np.full(n, 1.0 / n))
        system.add_body(body)

        restart_io = RestartIO(system)

        t0 = time.perf_counter()
        for _ in range(repeats):
            restart_io.write_to_file(1)
        t1 = time.perf_counter()
        for _ in range(repeats):
            restart_io.restore(1)
        t2 = time.perf_counter()

    return (t1 - t0) / repeats, (t2 - t1) / repeats

if __name__ == "__main__":
    for n in [100, 1000, 10000, 50000]:
        write_s, read_s = run(n)
        print(f"N={n:6d}  write={1e3*write_s:9.2f} ms  read={1e3*read_s:9.2f} ms")
