# gatesim

An interactive logic gate simulator built on pygame. Drop INPUT, OUTPUT,
AND, OR, NOT, NAND and NOR gates onto a canvas, connect them with wires
that route around other gates, and watch the signals update every frame.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
gatesim
```

This opens an 1800×880 window titled "Logic Gate Simulator". Close the
window or press **Escape** to quit.

## Using the simulator

The window has a sidebar on the left and the work area on the right. A
status line at the top shows the mode, the selected gate and whether the
grid is shown.

**Placement mode** (the default)

- Click a gate button in the sidebar to select that gate type; click
  **CLEAR** to drop the selection.
- Click in the work area to place the selected gate, centred on the
  mouse. Hold **Left Shift** while clicking to snap it to the grid (only
  while the grid is shown). A gate that would overlap another is not
  placed.
- Click an existing gate and drag to move it; its wires are re-routed.
  Clicking an INPUT gate toggles its value between 0 and 1.
- Press **Delete** while holding a gate to remove it together with its
  wires.

**Wiring mode**

- Use the button at the bottom of the sidebar to switch between modes.
  Switching drops the gate selection.
- Click a gate's output pin, then an input pin of another gate to
  connect them. Each input accepts one wire. Clicking empty space
  cancels. The pin under the mouse is ringed green when a connection
  there is allowed and red when it is not.
- Right-click a wire to delete it.

**Other keys**

- **G** toggles the grid.
- Hold **F1** to show which gate images were loaded.

## Gate images

Gates other than INPUT and OUTPUT are drawn from PNG images
(`and_gate.png`, `or_gate.png`, `not_gate.png`, `nand_gate.png`,
`nor_gate.png`) when they are found in one of these places, tried in
order: the current directory, `resources/`, `../resources/`,
`../../resources/`. Without images the gates are drawn as labelled
coloured boxes. Loading is reported through the `logging` module.

`gatesim.textures.load_gate_textures(search_paths=None)` loads them and
returns, for each gate type loaded, the path it came from;
`unload_gate_textures()` releases them again.

## Using it from Python

The circuit logic works without opening a window:

```python
from gatesim.constants import GateType
from gatesim.gate import Gate
from gatesim.wiring import WiringSystem

gates = [
    Gate(GateType.INPUT, (300, 100)),
    Gate(GateType.NOT, (500, 100)),
]
wiring = WiringSystem()
wiring.handle_wire_click(gates[0].output_point(), gates)   # start at the output pin
wiring.handle_wire_click(gates[1].input_point(0), gates)   # finish at the input pin

gates[0].input1 = True
wiring.update_signals(gates)
print(gates[1].output)  # False
```

The main pieces:

- `gatesim.gate.Gate` – a placed gate: `compute_output()`, `bounds`,
  `input_point()`, `output_point()`, `connection_points()` and `draw()`.
- `gatesim.wire.Wire` – an L-shaped wire: `calculate_route()` picks a
  corner that keeps clear of other gates, `is_near_path()` tests a point
  against it.
- `gatesim.wiring.WiringSystem` – the set of wires: creating and
  deleting them, `update_signals()` to propagate values, and keeping
  gate indices in step when a gate is removed.
- `gatesim.sidebar.Sidebar` – the palette; `check_button_click()` returns
  a `SidebarAction`.
- `gatesim.app.Simulator` – the whole editor state, driven by
  `left_click()`, `right_click()`, `drag()`, `release()`,
  `delete_selected()`, `toggle_grid()` and `step()`.

`update_signals()` moves values one wire per call, using each gate's
output from the previous call, so a signal needs one step for every gate
it passes through; the window calls it once per frame.

## What it does not do

Circuits live only in memory: there is no saving, loading or export, no
undo, and no way to resize the window or edit gate properties.