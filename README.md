# nmode

Building blocks for neuro-modular evolution experiments. The package holds
the experiment configuration model, network edges, the framed binary format
used to exchange values with a simulator, and a few file-system helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

- `nmode.parsing`: `elements_from_xml(text)` turns an XML document into
  `ParseElement` events, one for each opening and closing tag, in document
  order. `ParseElement` reads attributes with `text`, `integer`, `real` and
  `flag`, and raises `ValueError` for malformed numbers or booleans.
  `Dispatcher` hands every event to the `ParseNode` that is currently active.
  Each node's `add` returns the node that takes the next event, and
  `feed_all` returns the root node.
- `nmode.evaluation`: `EvaluationConfig` is the `<evaluation>` section. It
  holds the module name, lifetime, generations, iterations, log file type,
  log keeping, console logging and node/edge costs. When the section closes,
  its `parameters` dict is filled from the `<parameter>` entries.
  `EvaluationParameter` stores a name/value pair. It reads the value through
  `int_value`, `real_value` and `bool_value`, and supports `copy` and
  `reset_to`.
- `nmode.settings`: `ReproductionConfig` holds population size, tournament
  share, logging size (capped at the population size) and crossover
  probability. `VisualisationConfig` holds a drawing offset.
- `nmode.mutation`: `MutationConfig` holds a `NodeMutationConfig` and an
  `EdgeMutationConfig`, which carry the modify, add and delete probabilities
  and limits. The edge settings also carry a minimum distance and an
  `EdgeAddMode` (`UNIFORM` or `DISTANCE`). When `<mutation>` closes without
  both parts present, `ValueError` is raised. All three classes have `copy`.
- `nmode.edge`: `Edge` is a weighted connection between two node labels.
  Two edges compare equal when their weight, source and destination match.
- `nmode.codec`: the wire format. Every frame is a one-byte `ValueType` label
  followed by little-endian data: 32-bit ints, 64-bit doubles, and strings or
  vectors preceded by a 4-byte count. `encode_*` build frames. `read_frame`
  reads one frame of the expected type through any `read(n) -> bytes`
  callable, and `decode_*` turn its payload back into values. A wrong label,
  a truncated stream or a negative count raises `ProtocolError`.
- `nmode.filesystem`: `does_dir_exist`, `does_file_exist`,
  `first_existing_dir`, `first_existing_file`, `first_dir_containing_dir` and
  `first_dir_containing_file` search lists of paths. `check_valid_path` and
  `check_valid_path_from_alternatives` resolve a path and either raise
  `FileSystemError` or log a warning when it is missing. `create_dir` refuses
  an existing path, and `executable_exists` searches `PATH`.

## Example

```python
from nmode.parsing import Dispatcher, elements_from_xml
from nmode.evaluation import EvaluationConfig

xml = """
<evaluation module="walker">
  <lifetime iterations="1000"/>
  <cost node="0.1" edge="0.01"/>
  <parameter name="speed" value="2.5"/>
</evaluation>
"""

config = EvaluationConfig()
Dispatcher(config).feed_all(elements_from_xml(xml))
print(config.life_time, config.module, config.parameters)
```

```python
import io
from nmode import codec

frame = codec.encode_double_vector([1.0, 2.5])
stream = io.BytesIO(frame)
payload = codec.read_frame(stream.read, codec.ValueType.DOUBLE_VECTOR)
print(codec.decode_double_vector(payload))  # [1.0, 2.5]
```

## What the package does not do

- It opens no network connections. `nmode.codec` only builds and reads
  frames, so the caller supplies the socket or other byte stream.
- It does not run an evolution. It has no populations, individuals, modules
  or nodes, no mutation or reproduction operators, and no network simulation.
  The configuration classes only hold settings read from XML.
- It does not write configuration files back out, and it has no
  command-line program.