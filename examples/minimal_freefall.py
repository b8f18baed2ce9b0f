# examples/minimal_freefall.py
from ramp_ball.scene import Scene
from ramp_ball.renderer import BufferedRenderer

scene = Scene()
renderer = BufferedRenderer(scene.config.width, scene.config.height)

t_end = 1.0
while scene.time < t_end:
    renderer.render_scene(scene)
    scene.step()

print(renderer.frames[-1], end="")
print("t:", scene.time)
print("pos:", scene.ball.center)
print("vel:", scene.ball.velocity)
