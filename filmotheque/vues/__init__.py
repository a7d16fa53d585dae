"""Film and user stores with viewing-log analysis."""