"""
Generate a particle layout once, save it as a reload file, and seed a body
with a different name from it.
"""
import numpy as np
from sim_checkpoint import IOEnvironment, SimulationSystem, ParticleBody, ReloadParticleIO

env = IOEnvironment.from_root("run")
env.ensure_folders()

# Pre-processing run: a jittered lattice stands in for a relaxed layout.
pre = SimulationSystem(io_environment=env)
xs, ys = np.meshgrid(np.linspace(0, 1, 20), np.linspace(0, 1, 20))
lattice = np.column_stack([xs.ravel(), ys.ravel()])
lattice += 0.005 * np.random.default_rng(1).normal(size=lattice.shape)
cylinder = ParticleBody("Cylinder", position=lattice)
cylinder.add_variable("Volume", np.full(len(lattice), 1.0 / len(lattice)))
pre.add_body(cylinder)
ReloadParticleIO(pre, cylinder, given_name="CylinderRelaxed").write_to_file()

# Main run: a fresh body picks the layout up under its own name.
main = SimulationSystem(io_environment=env)
insert = main.add_body(ParticleBody("Insert"))
ReloadParticleIO(main, insert, given_name="CylinderRelaxed").read_from_file()

print("particles:", insert.number_of_particles, "dimension:", insert.dimension)
