# olio

A small ray tracer. It reads a plain-text scene holding one camera and
at most one surface (a sphere or a triangle). It casts one ray through
the centre of each pixel and writes an image. A pixel whose ray hits the
surface is red and every other pixel is black.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Rendering from the command line

```
rtbasic --input_scene scene.txt --output render.png
```

The short forms `-s` and `-o` work as well, and `-h` / `--help` prints
the usage. Both `--input_scene` and `--output` are required. The command
exits with status `-1` when the arguments are missing or wrong, and when
the scene file cannot be read or is invalid. A progress bar is shown
while the image renders.

The output format follows the file extension:

- `.exr` files are written as uncompressed OpenEXR with linear 32-bit
  floating-point colour.
- Any other extension is saved through Pillow at 8 bits per channel, so
  it must be a format that Pillow can write, such as `.png`.

## Scene files

Each line begins with a one-letter command followed by numbers separated
by whitespace. Empty lines and lines that begin with `/` are skipped, and
so are lines with unknown commands.

| Command | Fields |
|---------|--------|
| `c` | eye x y z, view direction x y z, focal length, viewport width, viewport height, image width in pixels, image height in pixels |
| `s` | centre x y z, radius |
| `t` | three corners, each x y z, in counter-clockwise order |

For example:

```
/ camera at the origin looking down -z
c 0 0 0  0 0 -1  1  2 1  320 160
s 0 0 -5 1
```

A scene must contain exactly one camera and at most one surface. The
following are rejected with an error:

- a line with too few numbers, or a field that is not a number;
- a viewport aspect ratio that is not finite and positive.

When the viewport aspect ratio differs from the image aspect ratio, a
warning is logged. The output image takes its height from the camera
line, and its width follows from the viewport aspect ratio.

## Using the library

```python
from olio.camera import Camera
from olio.sphere import Sphere
from olio.raytracer import RayTracer
from olio.types import vec3

camera = Camera(vec3(0, 0, 5), vec3(0, 0, 0), vec3(0, 1, 0), 60.0, 16 / 9)
sphere = Sphere(vec3(0, 0, 0), 1.0)

tracer = RayTracer(image_height=180)
image = tracer.render(sphere, camera)   # float RGB array, shape (height, width, 3)
tracer.write_image("sphere.png")        # optional gamma=..., ignored for .exr
```

`RayTracer.render` raises `ValueError` if the scene or the camera is
missing, or if the image size comes out empty. `write_image` raises
`RuntimeError` if nothing has been rendered yet. The image helpers in
`olio.raytracer` can also be used on their own:

- `gamma_correct_image` applies gamma correction;
- `rgb_to_bgr_uint8` converts to 8-bit BGR;
- `rgb_to_bgr_float32` converts to 32-bit float BGR.

`olio.parser.parse_file` loads a scene file. It returns a `ParsedScene`
holding `scene`, `camera` and `image_size` (width, height), and raises
`ParseError` when the file is missing or malformed. `parse_lines` does
the same for any iterable of lines.

### Intersections

`Sphere.hit(ray, tmin, tmax)` and `Triangle.hit(ray, tmin, tmax)` take a
`Ray` (origin and direction) and a range of accepted `t` values. They
return a `HitRecord` holding:

- `ray_t`, the ray parameter of the hit;
- `point`, the hit point;
- `normal`, the surface normal turned towards the ray;
- `front_face`, whether the ray struck the front face;
- `surface`, the surface that was hit.

When there is no hit they return `None`. `olio.triangle.ray_triangle_hit`
gives the raw `t` and barycentric `(u, v)` of a ray/triangle hit.

A `Camera` can be re-aimed with `look_at`, and `set_fovy` and
`set_aspect` change its field of view and aspect ratio. `get_ray(s, t)`
returns the ray through viewport point `(s, t)`, where both values run
from 0 to 1.

Every scene object derives from `olio.node.Node`. Each node has a name
and a process-wide unique `global_node_id`. `clone()` returns a copy
with a fresh id.

`olio.faults.install_segfault_handler` makes fatal signals dump a Python
traceback to stderr. `olio.faults.backtrace` returns the current call
stack as text.

## What it does not do

There is no lighting, shading, material or colour model. A hit is
always pure red. There are no reflections, shadows or anti-aliasing. A
scene holds a single surface; meshes and groups of surfaces are not
supported.