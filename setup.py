from setuptools import setup, find_packages

from route53client import version


long_description = """
A client library for the Amazon Route53 DNS service.  It manages hosted
zones and resource record sets over the Route53 REST API, speaking either
the 2013-04-01 or the 2011-05-05 API version and signing requests with AWS
Signature Version 4 or 3.
"""


setup(
    name="route53client",
    version=version.route53client,
    description="Client library for Amazon Route53",
    author="route53client Developers",
    license="MIT",
    packages=find_packages(include=["route53client", "route53client.*"]),
    long_description=long_description,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Intended Audience :: Information Technology",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: Internet :: WWW/HTTP",
        "License :: OSI Approved :: MIT License",
    ],
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.7",
    install_requires=[
        "attrs", "python-dateutil", "twisted", "zope.interface",
        "constantly", "pyrsistent", "requests", "xmltodict",
    ],
    extras_require={
        "dev": ["pytest"],
    },
)
