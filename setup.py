from setuptools import setup, find_namespace_packages

setup(
    name="parash",
    version="1.0.0",
    description="Intérprete de comandos mínimo con scripts SERIAL y PARALLEL (archivo local o URL http://)",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["parash", "parash.*"]),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["parash = parash.cli:main"]},
)
