from setuptools import find_namespace_packages, setup


def read_requirements():
    with open("requirements.txt") as f:
        return f.read().splitlines()


setup(
    name="dotpanel",
    version="0.1.0",
    description="A dock bar with a start menu and a calendar popup for Wayland compositors",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    ],
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pygobject-stubs[Gtk4,Gdk]",
        ],
        "test": [
            "pytest",
        ],
    },
    entry_points={"console_scripts": ["dotpanel=dotpanel.main:main"]},
    packages=find_namespace_packages(include=["dotpanel", "dotpanel.*"]),
    package_data={"dotpanel": ["resources/*.css"]},
    include_package_data=True,
)
