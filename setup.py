from setuptools import setup, find_packages

__version__ = "0.1.0"


def main():
    setup(
        name="geom3d",
        version=__version__,
        description="Mutable 3D polylines with revision tracking, plus the point, box and segment types they use",
        install_requires=["numpy", "xxhash"],
        extras_require={"testing": ["pytest"], "dev": ["pytest", "pre-commit"]},
        packages=find_packages("src"),
        package_dir={"": "src"},
        test_suite="test",
        python_requires=">=3.9",
    )


if __name__ == "__main__":
    main()
