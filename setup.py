import setuptools

__version__ = '0.1.0'



with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='genspline',
    version=__version__,
    license='GPL 3.0',
    description='B-spline curves over generic control points.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],

    keywords=['b-spline', 'spline', 'de Boor', 'curve'],

    packages=['genspline'],
    package_dir={'': 'src'},

    include_package_data=True,
    zip_safe=False,
    install_requires=['numpy', 'scipy', 'matplotlib', 'plotly', 'pyyaml'],
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
)
