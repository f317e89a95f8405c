"""Engine building blocks: colours, meshes, primitives, transforms, shadow maps, skyboxes, files, databases and logging."""

__version__ = "0.1.0"