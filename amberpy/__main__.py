from amberpy.cli import main

raise SystemExit(main())
