from yfclock.cli import main

raise SystemExit(main())
