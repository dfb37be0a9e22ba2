"""
Toy driver: advance particles, checkpoint every 50 steps, resume on demand.
Run:
  python examples/resume_run.py            # fresh run into ./run
  python examples/resume_run.py --resume   # continue from the latest checkpoint
"""
import sys
import numpy as np
from sim_checkpoint import (
    IOEnvironment, SimulationSystem, ParticleBody,
    BodyStatesRecording, RestartIO, MissingSnapshotError,
)

dt = 1e-3
n_steps = 200

system = SimulationSystem(io_environment=IOEnvironment.from_root("run"))
system.io_environment.ensure_folders()

rng = np.random.default_rng(0)
water = ParticleBody("Water", position=rng.random((100, 2)))
water.add_variable("Velocity", rng.normal(size=(100, 2)), record=True)
system.add_body(water)

recording = BodyStatesRecording(system)
restart_io = RestartIO(system)

start = 0
if "--resume" in sys.argv:
    start = restart_io.latest_step() or 0
    if start:
        try:
            restart_io.restore(start)
        except MissingSnapshotError as e:
            # Resuming without data is not possible: stop here.
            sys.exit(f"cannot resume: {e}")
        print(f"resumed at step {start}, t={system.physical_time:.6f}")

for step in range(start + 1, n_steps + 1):
    water.position += dt * water.variables["Velocity"]
    system.physical_time += dt
    if step % 10 == 0:
        recording.write_to_file()
    if step % 50 == 0:
        restart_io.write_to_file(step)

print("t:", system.physical_time)
print("checkpoints:", restart_io.available_steps())
