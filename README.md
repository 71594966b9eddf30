# structural-patterns

Small, self-contained examples of the four classic structural design
patterns. Each module models one scenario and has a command that prints a
short walkthrough of the pattern in action. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Pattern | Scenario |
| --- | --- | --- |
| `structural_patterns.adapter` | Adapter | A `LegacyComponent` with a `go()` method fitted into the `Component` interface by `LegacyAdapter` (object adapter, wraps a `LegacyComponent`) and `LegacyClassAdapter` (class adapter, inherits from it) |
| `structural_patterns.cloud_storage` | Adapter | A third-party `VirtualDrive` (`upload_data`, `used_space`) made usable as a `CloudStorage` (`upload_contents`, `free_space`) through `VirtualDriveAdapter`, next to `CloudDrive` and `FastShare` |
| `structural_patterns.sharing` | (before Bridge) | Text sharing services multiplied by subclassing: `EmailShare`, `SMSShare`, `EmailShareEncrypted`, `SMSShareEncrypted`; plus `xor_encrypt(text, key=64)` |
| `structural_patterns.sharing_bridge` | Bridge | The same idea split into a `TextSharer` (`EmailSharer`, `EncryptedEmailSharer`) and a pluggable `TextHandler` (`PlainTextHandler`, `EncryptedTextHandler`) |
| `structural_patterns.vehicles` | Bridge | `Car`, `Truck` and `Bike` driven by any `Engine` (`GasEngine`, `ElectricEngine`, `HybridEngine`) |
| `structural_patterns.boxes` | Composite | A `Box` of `Book`s, `Toy`s and other boxes, all of them `Product`s with a `price()` |
| `structural_patterns.shapes` | Composite | `Circle`, `Rectangle` and `Triangle` grouped in a `CompositeShape` with `add_shape` and `remove_shape` |
| `structural_patterns.computershop` | Decorator | Upgrades as subclasses (`DesktopWithMemoryUpgrade`, ...), then as `MemoryUpgradeDecorator` and `GraphicsUpgradeDecorator` around any `Computer` |
| `structural_patterns.pizza` | Decorator | Toppings (`MushroomDecorator`, `ExtraCheeseDecorator`, `TomatoDecorator`) stacked on any `Pizza` |

## Running the demos

Every module has a command:

```
adapter-demo
cloud-storage-demo
sharing-demo
sharing-bridge-demo
vehicles-demo
boxes-demo
shapes-demo
computershop-demo
pizza-demo
```

## Using the classes

Decorators wrap each other freely:

```python
from structural_patterns.pizza import MargheritaPizza, MushroomDecorator, ExtraCheeseDecorator

pizza = ExtraCheeseDecorator(MushroomDecorator(MargheritaPizza()))
print(pizza.description())  # Margherita Pizza with mushrooms, plus extra cheese
print(pizza.price())
```

```python
from structural_patterns.computershop import Desktop, MemoryUpgradeDecorator

computer = MemoryUpgradeDecorator(Desktop())
print(computer.description())  # Desktop with memory upgrade
print(computer.price())        # 1500.0
```

Composites are priced by walking the whole tree; each item reports as its
price is read:

```python
from structural_patterns.boxes import Book, Toy, Box

small = Box("Small Box")
small.add_product(Book("Robinson Crusoe", 4.99))
small.add_product(Toy("Star Trooper", 39.99))

big = Box("Big Box")
big.add_product(Toy("Barbie Dreamhouse", 59.99))
big.add_product(small)

total = big.price()
```

A bridge lets the sharing channel and the text preparation vary on their own:

```python
from structural_patterns.sharing_bridge import EncryptedTextHandler, EncryptedEmailSharer

sharer = EncryptedEmailSharer(EncryptedTextHandler())
sharer.share_text("Beam me up, Scotty!")
```

The cloud storage services take an optional random source, and the adapter an
optional clock, so their output can be made repeatable:

```python
import random
from structural_patterns.cloud_storage import CloudDrive, VirtualDrive, VirtualDriveAdapter

drive = CloudDrive(random.Random(1))
drive.free_space()

adapter = VirtualDriveAdapter(VirtualDrive(random.Random(1)), clock=lambda: 1_700_000_000)
adapter.upload_contents("Beam me up, Scotty!")
```

## What it does not do

These are illustrations of class structure, not working services. Nothing is
sent anywhere: the sharing classes and the cloud storage classes only print
what they would do and return `True`, and the free space they report is a
random number. `xor_encrypt` is a reversible XOR for demonstration and offers
no real protection.