"""Setup absolute_router."""

from setuptools import find_packages, setup

with open("README.md") as f:
    readme = f.read()


extra_reqs = {"test": ["pytest", "pytest-cov", "mock"]}


setup(
    name="absolute-router",
    version="1.0.0",
    description="Url pattern routing with host segments and url generation",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
    ],
    keywords="routing url-pattern reverse-routing",
    license="BSD",
    packages=find_packages(exclude=["ez_setup", "example", "tests"]),
    include_package_data=True,
    zip_safe=False,
    extras_require=extra_reqs,
)
