from perfectroot.cli import main

raise SystemExit(main())
