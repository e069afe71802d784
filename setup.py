from setuptools import setup


setup(name='geotransforms',
      version='0.1.0',
      description='Change-of-variables kernels for integrating over canonical solids',
      license='MIT',
      packages=['geotransforms'],
      python_requires='>=3.9',
      install_requires=[
          'numpy',
           ],
      extras_require={
          'test': [
              'pytest',
              'scipy',
          ],
      },
      long_description='None',
      long_description_content_type='text/markdown',
      keywords='geometry integration jacobian',
      classifiers=[
          # How mature is this project? Common values are
          #   3 - Alpha
          #   4 - Beta
          #   5 - Production/Stable
          'Development Status :: 3 - Alpha',

          # Indicate who your project is intended for
          'Intended Audience :: Science/Research',
          'Intended Audience :: Developers',
          'Topic :: Scientific/Engineering',
          'Topic :: Scientific/Engineering :: Mathematics',

          'License :: OSI Approved :: MIT License',

          'Programming Language :: Python :: 3.9',
      ],
      zip_safe=False)
