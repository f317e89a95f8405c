# glistkit

Building blocks for the engine side of small 2D and 3D applications. The
package holds the parts of a rendering engine that can be computed and tested
without a GPU: vertex data, ready-made meshes, 4×4 matrices, shadow-map state
and skybox data. It also has helpers for logging, time, strings, files and
SQLite queries.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `glistkit.color` | `Color`: RGBA in floats, set from floats (`set`), 0–255 bytes (`set_bytes`) or another colour (`copy_from`) |
| `glistkit.utils` | Logging (`Log`, `LogLevel`, `logi`, `logd`, `logw`, `loge`, `enable_logging`, `disable_logging`), angle helpers, randomness, clock and calendar helpers, `timestamp_string`, `string_replace`, `to_str`, `to_int`, `sign` |
| `glistkit.files` | `AssetFile` and `FileMode`, plus path queries such as `file_exists`, `is_directory`, `file_stem`, `parent_directory` and `add_trailing_separator` |
| `glistkit.database` | `Database` and `DatabaseError`: runs SQLite statements and queues selected rows as delimited strings |
| `glistkit.mesh` | `Vertex`, `VertexBuffer`, `Mesh`, `DrawMode` |
| `glistkit.skinnedmesh` | `SkinnedMesh` with per-vertex animation and per-frame vertex animation data |
| `glistkit.primitives` | `Box`, `Plane`, `Sphere`, `Line` |
| `glistkit.transforms` | 4×4 matrix helpers: `identity`, `translate`, `rotate`, `scale`, `ortho`, `perspective`, `look_at` |
| `glistkit.skyboxgeometry` | Fixed capture cube, screen quad and skybox vertex and index data |
| `glistkit.shadowmap` | `ShadowMap` and `RenderPass`: light view and projection matrices and render-pass state |
| `glistkit.skybox` | `Skybox` (faces loaded with Pillow), `capture_projection`, `capture_views`, `prefilter_mip_levels` |

## Examples

Colours:

```python
from glistkit.color import Color

c = Color()
c.set_bytes(255, 128, 0, 255)
print(c.r, c.g, c.b, c.a)
```

Meshes and primitives:

```python
from glistkit.primitives import Sphere, Line

sphere = Sphere(16, 16)
print(sphere.vbo.element_count())

line = Line()
line.set_points(0.0, 0.0, 10.0, 10.0)   # 2D; six numbers give a 3D line
```

Transforms:

```python
import numpy as np
from glistkit import transforms

view = transforms.look_at(np.array([0.0, 5.0, 10.0]), np.zeros(3), np.array([0.0, 1.0, 0.0]))
proj = transforms.ortho(-40.0, 40.0, -40.0, 40.0, 2.0, 114.0)
light_matrix = proj @ view
```

Shadow-map state (the light and camera are any objects with a `position`):

```python
from types import SimpleNamespace
from glistkit.shadowmap import ShadowMap

light = SimpleNamespace(position=(0.0, 10.0, 10.0))
camera = SimpleNamespace(position=(0.0, 1.0, 5.0))

shadows = ShadowMap()
shadows.allocate(light, camera, 1024, 1024)
shadows.activate()
print(shadows.enable())        # RenderPass.DEPTH
print(shadows.light_matrix)
```

Querying a database:

```python
from glistkit.database import Database

db = Database()
db.open(":memory:")
db.execute("CREATE TABLE t (a, b)")
db.execute("INSERT INTO t VALUES (1, 'x')")
db.execute("SELECT * FROM t", "q1")
while db.has_select_data():
    print(db.select_data())   # "q1|1|x"
db.close()
```

Logging:

```python
from glistkit.utils import logi

logi("Game").append("started").flush()   # [INFO] Game: started
```

## What the package does not do

- It does not draw anything. There is no window, no GPU context and no
  shader calls; meshes, buffers, matrices and shadow-map state are data for a
  renderer to consume.
- It has no general texture class. Images are read only by `Skybox`, for its
  cube faces and equirectangular panorama.
- It has no sound playback, no worker-thread helper and no background asset
  loader.
- It has no command-line program.