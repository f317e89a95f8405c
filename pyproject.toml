[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glistkit"
version = "0.1.0"
description = "Engine-side building blocks for small 2D/3D applications: colours, meshes, primitives, transforms, shadow-map state, skyboxes, files, SQLite queries and logging helpers."
requires-python = ">=3.10"
keywords = ["game engine", "graphics", "mesh", "primitives", "skybox", "shadow map", "transforms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glistkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
