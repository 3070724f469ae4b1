import os
import sys

from setuptools import find_packages, setup


def setup_package():
    src_path = os.path.dirname(os.path.abspath(sys.argv[0]))
    old_path = os.getcwd()
    os.chdir(src_path)
    sys.path.insert(0, src_path)

    install_requires = ['numpy>=1.17', 'tabulate>=0.8', 'pytest']
    tests_require = install_requires + ['scipy>=1.0']

    metadata = dict(
        name='brentmin',
        maintainer="brentmin Developers",
        version='1.0.1.dev1',
        description="Bracket refinement and Brent's local minimization of"
                    " scalar functions.",
        packages=find_packages(exclude=['examples']),
        license="MIT",
        python_requires='>=3.8',
        install_requires=install_requires,
        extras_require=dict(test=tests_require),
        zip_safe=False,
        include_package_data=True,
    )

    try:
        setup(**metadata)
    finally:
        del sys.path[0]
        os.chdir(old_path)

if __name__ == '__main__':
    setup_package()
