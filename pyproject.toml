[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structural-patterns"
version = "1.0.0"
description = "Small, runnable examples of the adapter, bridge, composite and decorator design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "structural-patterns",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adapter-demo = "structural_patterns.adapter:main"
cloud-storage-demo = "structural_patterns.cloud_storage:main"
sharing-demo = "structural_patterns.sharing:main"
sharing-bridge-demo = "structural_patterns.sharing_bridge:main"
vehicles-demo = "structural_patterns.vehicles:main"
boxes-demo = "structural_patterns.boxes:main"
shapes-demo = "structural_patterns.shapes:main"
computershop-demo = "structural_patterns.computershop:main"
pizza-demo = "structural_patterns.pizza:main"

[tool.hatch.build.targets.wheel]
packages = ["structural_patterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
