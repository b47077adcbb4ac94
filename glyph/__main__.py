# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from .cli import main

raise SystemExit(main())
