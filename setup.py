from setuptools import setup

setup(
    name="routemap",
    version="0.1.0",
    description="Tool for listing airline route maps as adjacency lists",
    license="MIT",
    packages=["routemap", "routemap.templates"],
    python_requires=">=3.7",
    install_requires=[
        "Jinja2>=3",
        "PyYAML>=5.1",
        "python-slugify>=4",
        "watchdog>=2",
    ],
    extras_require={"test": ["pytest"]},
    package_data={"routemap.templates": ["*.jinja"]},
    entry_points={"console_scripts": ["routemap = routemap.cli:main"]},
)
