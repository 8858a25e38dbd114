# senseshift

A small library for driving haptic actuators arranged on a body. It models
output *planes* (chest, face, fingertips, …) made of actuators at 2D
positions. It groups the planes into a *body* keyed by target. It also
decodes bHaptics motor payloads into intensity writes.

## Installation

```
pip install senseshift
```

## Concepts

- `senseshift.point2.Point2` is an immutable 2D point, ordered by `(x, y)`.
  `a.distance(b)` gives the Euclidean distance between two points, and so
  does `a - b`.
- `senseshift.interface` holds the core types:
  - the `Target` and `Effect` enums;
  - `VibroEffectData`, whose `float()` is its intensity;
  - `EffectRequest`;
  - the `Actuator` base class. Subclass `Actuator` and implement
    `write_state(value)` to drive an output. You may also override `init()`,
    which is called when the plane is set up.
- `senseshift.plane` holds the output planes and grid helpers:
  - `OutputPlane` maps positions to actuators. `effect(position, value)`
    writes to the actuator at that position. It logs a warning if there is
    no actuator there. `available_points()` and `actuator_states()` report
    the plane's positions and the last values written to them.
  - `OutputPlaneClosest` sends each effect to the actuator nearest the
    requested point.
  - `map_point` and `map_matrix_coordinates` spread a grid of actuators
    evenly across the 0–255 coordinate range, leaving a margin at each edge.
- `senseshift.body.OutputBody` holds one plane per `Target`. It sets the
  planes up and routes `effect(target, position, value)` to the right plane.
- `senseshift.bh_devices` holds the actuator layouts of bHaptics devices:
  TactSuit X40 and X16 (with `TACTSUIT_X16_GROUPS`), Tactal, TactVisor,
  Tactosy2, TactosyH and TactosyF. The module also provides
  `WRIST_MOTOR_POSITION`, `grid_point(x, y, size_x, size_y)` and
  `firmware_version(major, minor)`.
- `senseshift.bh_encoding.Decoder` applies payloads to a body. It has four
  methods:
  - `apply_plain`: one byte, 0–100, per layout entry.
  - `apply_plain_target`: the same, with every position on a single target.
  - `apply_vest`: two 4-bit intensities per byte, over a 40-entry layout.
  - `apply_vest_grouped`: the X16 grouping, where each group takes the
    maximum of its motors.

  Short payloads are zero-padded. Long ones are truncated.
- `senseshift.battery` provides `BatteryState` and the `LIPO_1S_42` lookup
  table from voltage to charge fraction. A `BatteryState` holds an 8-bit
  `level` and gives it as a fraction from 0.0 to 1.0 with `fraction()`.
- `senseshift.application` provides `Application`, which owns the vibration
  body (`vibro_body()`). Register an `EventListener` with
  `add_event_listener`. `post_event(Event(name))` then delivers the event to
  every listener, in the order they were added.

## Example

```python
from senseshift.interface import Actuator, Target
from senseshift.plane import OutputPlane, map_matrix_coordinates
from senseshift.body import OutputBody


class PrintActuator(Actuator):
    def __init__(self, name):
        self.name = name

    def init(self):
        print(f"{self.name} ready")

    def write_state(self, value):
        print(f"{self.name} -> {value:.2f}")


actuators = map_matrix_coordinates([
    [PrintActuator("a"), PrintActuator("b")],
    [PrintActuator("c"), PrintActuator("d")],
])

body = OutputBody()
body.add_target(Target.CHEST_FRONT, OutputPlane(actuators))
body.setup()

first = next(iter(actuators))
body.effect(Target.CHEST_FRONT, first, 0.5)
```

## What this package does not do

This is a library only. It has no command-line program. It does not talk to
hardware: there are no drivers for PWM or servo outputs. It has no Bluetooth
or serial connection for receiving payloads, and it cannot read battery
voltage. You supply the actuators by subclassing `Actuator`. You feed
payloads to `Decoder` yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```