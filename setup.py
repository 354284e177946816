from setuptools import setup


if __name__ == "__main__":

    with open("README.rst") as f:
        long_description = f.read()

    setup(
        classifiers=[
            "Environment :: Web Environment",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: Implementation :: CPython",
            "Programming Language :: Python :: Implementation :: PyPy",
            "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        description="Request body and query string helpers for web apps",
        long_description=long_description,
        long_description_content_type="text/x-rst",
        python_requires=">=3.8",
        setup_requires=["incremental"],
        use_incremental=True,
        install_requires=[
            "attrs",
            "hyperlink",
            "incremental",
            "Twisted>=16.6",
            "Werkzeug>=2.3",  # 2.3 introduces max_form_parts
            "zope.interface",
        ],
        extras_require={
            "test": [
                "hypothesis",
            ]
        },
        keywords="twisted werkzeug wsgi web request json forms",
        license="MIT",
        name="satchel",
        packages=["satchel", "satchel.test"],
        package_dir={"": "src"},
        package_data=dict(
            satchel=[],
        ),
        zip_safe=False,
    )
