from setuptools import setup

setup(
    name="weightgraph",
    version="0.1.0",
    description="Generic directed weighted graph with breadth-first and depth-first traversal",
    license="MIT",
    packages=["weightgraph", "weightgraph.templates"],
    python_requires=">=3.8",
    install_requires=[
        "Jinja2>=3,<4",
        "PyYAML>=5.1",
    ],
    extras_require={"test": ["pytest>=7"]},
    package_data={"weightgraph.templates": ["*.jinja"],},
    entry_points={"console_scripts": ["wg = weightgraph.cli:main"]},
)
