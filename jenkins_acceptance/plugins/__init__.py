"""Page areas contributed by individual CI server plugins."""
