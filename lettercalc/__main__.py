from lettercalc.cli import main

raise SystemExit(main())
