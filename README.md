# meshscene

`meshscene` holds the scene state and the math behind a small mesh viewer.
It keeps track of the camera, materials, light, objects and skybox images,
and it saves and loads scenes as YAML. It does not draw anything. The
package contains:

- `meshscene.camera.Camera`: a perspective or orthographic camera with zoom,
  resizing, and view and projection matrices;
- `meshscene.transforms`: `look_at`, `perspective`, `ortho`, `rotate`,
  `translate`, `scale`, `euler_to_matrix` and `decompose_transform`;
- `meshscene.material.Material` and
  `meshscene.materials_library.MaterialsLibrary`, which store materials under
  a name and a numeric id;
- `meshscene.light.Light`, a point light with ambient, diffuse and specular
  terms;
- `meshscene.mesh`: `SourceMesh`, `Mesh`, `MeshData` and the `PostProcess`
  flags, which combine sub-meshes into shared vertex and index streams;
- `meshscene.scene_object.SceneObject`, `meshscene.scene.Scene` and
  `meshscene.skybox.SkyBox`;
- `meshscene.serializer`, which reads and writes `.scene` files;
- `meshscene.app`: the `App` callback interface, the `Engine` settings and
  `MeshViewerApp`, which orbits the camera around its target;
- `meshscene.errors`: text for OpenGL error codes and debug-output
  categories, plus the `OpenGLError` exception;
- `meshscene.conventions`: the names used for shader uniforms and attributes,
  the uniform-block binding points, and the `ShaderType` enum (`UNLIT`,
  `LIGHT`, `SKYBOX`).

It requires Python 3.10 or later, numpy, PyYAML and Pillow.

## Camera

```python
from meshscene.camera import Camera

camera = Camera(800, 600, (0.0, 0.0, -12.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))

camera.update_zoom(1.0)      # perspective: subtracts from the field of view (starts at 45 degrees)
camera.change_mode()         # toggles orthographic projection
camera.update_zoom(1.0)      # orthographic: rescales the view box
camera.resize(1024, 768)     # new aspect ratio; a zero dimension gives 0

forward = camera.view_dir()
right = camera.right_vector()
```

The perspective projection uses near and far planes of 0.1 and 20. The
orthographic box extends ±20 in depth. `set_camera_view(eye, look_at, up)`
places the camera and rebuilds `view_matrix`. `set_view_matrix(matrix)`
replaces the view matrix and leaves eye and target as they are.

## Transforms

```python
import numpy as np
from meshscene import transforms

model = transforms.translate(np.identity(4), (1.0, 2.0, 3.0))
model = transforms.rotate(model, np.pi / 2, (0.0, 1.0, 0.0))
model = transforms.scale(model, (2.0, 2.0, 2.0))

translation, rotation, scale = transforms.decompose_transform(model)
```

Matrices are 4×4 numpy arrays that act on column vectors (`m @ v`).
`decompose_transform` returns the rotation in radians. It raises
`ValueError` when the matrix's homogeneous component is zero.

## Materials and lights

```python
from meshscene.materials_library import MaterialsLibrary
from meshscene.light import Light

materials = MaterialsLibrary()
materials.create_material("chrome", (0.9, 0.9, 0.9), 32.0, 0.7, False)
chrome = materials.get_material(materials.material_id("chrome"))

light = Light((0.0, 4.0, 0.0), (1.0, 1.0, 1.0), 0.8)
light.ambient(), light.diffuse(), light.specular()
```

Each call to `create_material` uses the current id and then advances it.
`load_material` adds a material under an id you pass and keeps the counter
at least that high. `clear()` removes every material but leaves the counter
alone. An unknown name or id raises `KeyError`. A material's diffuse colour
is 0.6 × its colour and its specular colour is 0.3 × its colour.
`Material.uniform_block()` and `Light.uniform_block()` return the packed
bytes of the matching shader uniform blocks.

## Meshes

```python
from meshscene.mesh import Mesh, SourceMesh

mesh = Mesh()
mesh.create([SourceMesh(vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)], faces=[(0, 1, 2)])])
mesh.draw_calls()   # [(index count, byte offset, base vertex), ...]
```

## Scenes

```python
from meshscene.scene import Scene

scene = Scene(materials, models_dir="resources/models")
bull = scene.create_entity("bull", "Bull.obj", materials.material_id("chrome"),
                           position=(0.0, -3.0, 0.0), rotation=(-90.0, 0.0, 0.0))
scene.create_entity("horn", "Horn.obj", materials.material_id("chrome"), parent="bull")
scene.create_light((0.0, 4.0, 0.0), (1.0, 1.0, 1.0), 0.8)
scene.search_object_by_name("horn")
```

If no mesh loader is given, meshes are read as Wavefront `.obj` files.
Polygons are split into triangles and identical vertices are joined. If no
models directory is given, it defaults to `resources/models` under the
current directory. Object rotations are in degrees.
`SceneObject.model_matrix()` adds up positions along the chain of parents,
but rotation and scale come from the object alone. Naming a parent that does
not exist raises `KeyError`.

`SkyBox.load_cube_map(folder)` loads `right`, `left`, `top`, `bottom`,
`front` and `back` `.jpg` images as RGB. If a face cannot be read, a warning
is logged and that face is stored as `None`.

## Scene files

```python
from meshscene import serializer

serializer.serialize(scene, materials, "level.scene")
serializer.deserialize(scene, materials, "level.scene")
```

A `.scene` file has four sections: `Materials`, `Objects` (children nested
under `Children`), `Light` and `Skybox`. Loading a file first clears the
materials library and the scene and then rebuilds both. The light and skybox
are replaced only when the file includes them. A malformed file raises
`ValueError`. A missing field raises `KeyError`.

## Viewer application

`MeshViewerApp` handles input through the `App` callbacks:

- holding mouse button 3 while the pointer moves orbits the camera around
  its target;
- scrolling zooms;
- pressing `P` switches between perspective and orthographic projection.

`init_callback((width, height))` sets up the default scene: a camera, a
`reflectiveTransparent` material, a `Bull.obj` model and a light. `Engine`
records the application, the OpenGL version and the window settings. The
defaults are 640×480 and OpenGL 3.3.

## What it does not do

- It does not open windows, create an OpenGL context, compile shaders or
  upload buffers.
- It has no render loop, no editor panels or gizmos, and no file dialogs.
- It installs no command to run.

`Engine` only stores settings, and `meshscene.errors` only turns codes into
text. The input callbacks and the matrices, vertex streams, draw calls and
uniform-block bytes this package produces are meant to be fed by, and passed
to, a windowing and rendering layer that you provide.