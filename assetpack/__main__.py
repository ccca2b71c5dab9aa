from assetpack.cli import main

raise SystemExit(main())
