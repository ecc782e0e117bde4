import os
from setuptools import setup, find_namespace_packages
from setuptools.command.build_py import build_py as _build

CLASSIFIERS = [
    'Operating System :: OS Independent',
    'Intended Audience :: Developers',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware',
    'Topic :: Software Development :: Libraries :: Python Modules'
]

pkgdir = os.path.dirname(os.path.abspath(__file__))

def get_version():
    out = "dev"
    versfile = os.path.join(pkgdir, 'VERSION')
    if os.path.exists(versfile):
        with open(versfile) as fd:
            parts = fd.readline().split()
        if len(parts) > 0:
            out = parts[-1]
    else:
        out = "(unknown)"
    return out

def write_version_mod(version, builddir):
    versmodf = os.path.join(builddir, "hiccup", "version.py")
    if not os.path.isdir(os.path.dirname(versmodf)):
        return
    print("setting version for hiccup")
    with open(versmodf, 'w') as fd:
        fd.write('"""')
        fd.write("""
An identification of the package version.  Note that this module file gets
(over-) written by the build process.
""")
        fd.write('"""\n\n')
        fd.write('__version__ = "')
        fd.write(version)
        fd.write('"\n')

class build(_build):

    def run(self):
        _build.run(self)
        write_version_mod(get_version(), self.build_lib)

setup(name='hiccup',
      version=get_version(),
      description="hiccup: content negotiation for WSGI request handlers",
      python_requires='>=3.8',
      install_requires=[ 'PyYAML>=5.1' ],
      package_dir={'': 'python'},
      packages=find_namespace_packages(where='python', include=['hiccup', 'hiccup.*']),
      cmdclass={'build_py': build},
      classifiers=CLASSIFIERS,
      zip_safe=False
)
