#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
build.py - Build script for hourcalc
Creates a self-contained .pyz archive bundling the package and its dependencies
"""

import os
import sys
import shutil
import subprocess
import tempfile
import zipapp
from datetime import datetime

RUNTIME_DEPENDENCIES = ['python-dateutil']


class ArchiveBuilder:
    def __init__(self):
        self.root_dir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
        self.package_dir = os.path.join(self.root_dir, 'hourcalc')
        self.dist_dir = os.path.join(self.root_dir, 'dist')
        self.version = self.get_version()

    def get_version(self):
        """Get version from git tag, or today's date outside a checkout"""
        try:
            result = subprocess.run(
                ['git', 'describe', '--tags', '--always'],
                capture_output=True,
                text=True,
                check=True
            )
            return result.stdout.strip()
        except (OSError, subprocess.CalledProcessError):
            return datetime.now().strftime('%Y%m%d')

    def verify_files(self):
        """Verify all required modules exist"""
        required_files = [
            '__init__.py',
            'hours.py',
            'time_parser.py',
            'conversion.py',
            'range_calc.py',
            'clock.py',
        ]

        missing_files = [name for name in required_files
                         if not os.path.exists(os.path.join(self.package_dir, name))]
        if missing_files:
            print("❌ Missing required files:")
            for name in missing_files:
                print(f"  - {name}")
            return False
        return True

    def create_archive(self):
        """Create the .pyz archive"""
        print("\nCreating archive...")

        with tempfile.TemporaryDirectory() as temp_dir:
            subprocess.check_call([
                sys.executable, '-m', 'pip', 'install',
                '--target=' + temp_dir,
                *RUNTIME_DEPENDENCIES
            ])

            # Tests stay out of the archive
            shutil.copytree(
                self.package_dir,
                os.path.join(temp_dir, 'hourcalc'),
                ignore=shutil.ignore_patterns('test_*.py', '__pycache__')
            )

            os.makedirs(self.dist_dir, exist_ok=True)
            output_file = os.path.join(self.dist_dir, f'hourcalc-{self.version}.pyz')
            if os.path.exists(output_file):
                os.remove(output_file)

            zipapp.create_archive(
                temp_dir,
                target=output_file,
                interpreter='/usr/bin/env python3',
                main='hourcalc.hours:cli'
            )

            print(f"✓ Archive created: {output_file}")
            return output_file

    def build(self):
        """Run complete build process"""
        print(f"Building hourcalc v{self.version}")

        try:
            if not self.verify_files():
                sys.exit(1)

            output_file = self.create_archive()

            print("\n✅ Build completed successfully!")
            print(f"Archive: {output_file}")

        except (OSError, subprocess.CalledProcessError) as e:
            print(f"\n❌ Error during build: {str(e)}")
            sys.exit(1)


def main():
    builder = ArchiveBuilder()
    builder.build()


if __name__ == '__main__':
    main()
