"""Request builders and result types for z/OSMF dataset operations."""