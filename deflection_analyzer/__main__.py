from deflection_analyzer.cli import main

raise SystemExit(main())
