from setuptools import setup

setup(
    name="Tarjimani",
    version="0.1",
    packages=["tarjimani"],
    license="",
    description="Interactive vocabulary translator",
    python_requires=">=3.12",
    entry_points={
        "console_scripts": ["tarjimani=tarjimani.__main__:main"],
    },
    install_requires=[
        "coloredlogs",
        "colour~=0.1.5",
        "iso639-lang",
        "pydantic",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
