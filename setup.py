from setuptools import setup, find_packages

setup(
    name="linalgebra",
    version="1.0",
    description="Exact and quad precision real numbers, vectors and matrices",
    long_description=("Linear algebra on real numbers that are held either as exact fractions of 64-bit integers or "
                      "as quad precision approximations, with automatic promotion between both representations"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["linalgebra", "linalgebra.*"]),
    install_requires=["numpy", "sympy", "mpmath"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    entry_points={"console_scripts": ["linalgebra-demo=linalgebra.cli:start_from_command_line"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "exact arithmetic", "rational numbers", "quad precision"],
    zip_safe=False,
)
