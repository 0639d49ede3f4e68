from setuptools import setup, find_packages

setup(
    name="shapecanvas",
    version="0.1.0",
    description="Canvas of random circles, ovals, squares and rectangles with a text report",
    author="Vous",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "PyQt5>=5.15"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "shapecanvas = shapecanvas.__main__:main"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: PyQt5"
    ],
)
