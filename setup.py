import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="zerofun",
    version="0.1.0",
    description="Classical iterative methods for finding a real zero of a "
                "scalar function.",
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest', 'scipy'],
    },
    keywords='root finding bisection brent newton secant',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['zerofun', 'zerofun.*']),
    python_requires='>=3.9',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
