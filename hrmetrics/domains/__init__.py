"""Record domains feeding the metrics engine: workforce, attendance and recruitment."""
