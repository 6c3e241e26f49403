import os
import re
import setuptools
import types

MAIN_MODULE_NAME = "kotoba"
TARGET_PROJECT_NAME = "hikari-kotoba"


def load_meta_data():
    pattern = re.compile(r"__(?P<key>\w+)__\s=\s\"(?P<value>.+)\"")
    with open(os.path.join(MAIN_MODULE_NAME, "_about.py"), "r") as file:
        code = file.read()

    groups = dict(group.groups() for group in pattern.finditer(code))
    return types.SimpleNamespace(**groups)


def load_requirements(path):
    with open(path) as file:
        return [line.strip() for line in file if line.strip() and not line.startswith(("#", "-"))]


metadata = load_meta_data()
REQUIREMENTS = load_requirements("requirements.txt")

with open("README.md") as f:
    README = f.read()

setuptools.setup(
    name=TARGET_PROJECT_NAME,
    version=metadata.version,
    package_data={MAIN_MODULE_NAME: ["py.typed"]},
    packages=setuptools.find_namespace_packages(include=[f"{MAIN_MODULE_NAME}*"]),
    author=metadata.author,
    author_email=metadata.email,
    license=metadata.license,
    description="Interactive argument collection for Hikari message commands",
    long_description=README,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require={"tests": load_requirements(os.path.join("dev-requirements", "tests.txt"))},
    python_requires=">=3.9.0",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: BSD License",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Communications :: Chat",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
)
