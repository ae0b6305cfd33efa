"""
Streamlit Demo for Movie Graph Analytics
Run with: streamlit run app.py
"""

import logging

import streamlit as st

import config
from src.data.loader import load_movies
from src.graph.analytics import analyze_graph
from src.graph.session import MovieGraphSession
from src.models.content_based import RelatedMoviesRecommender

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

# Page config
st.set_page_config(
    page_title="Movie Graph Analytics",
    page_icon="🎬",
    layout="wide"
)

# Custom CSS for styling
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #FF6B6B;
        text-align: center;
        margin-bottom: 2rem;
    }
    .selected-movie {
        background-color: #ea384c;
        color: white;
        padding: 8px 12px;
        border-radius: 8px;
        margin: 4px 0;
    }
    .related-movie {
        background-color: #3b82f6;
        color: white;
        padding: 8px 12px;
        border-radius: 8px;
        margin: 4px 0;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def load_catalog():
    """Load MovieLens movies (cached)."""
    return load_movies()


@st.cache_resource
def load_recommender(_catalog):
    return RelatedMoviesRecommender(_catalog)


def get_session():
    if 'graph_session' not in st.session_state:
        st.session_state['graph_session'] = MovieGraphSession()
    return st.session_state['graph_session']


def show_sequence(node_ids, titles, empty_message):
    if not node_ids:
        st.caption(empty_message)
        return
    for i, node_id in enumerate(node_ids, 1):
        st.write(f"{i}. {titles.get(node_id, node_id)}")


def main():
    st.markdown('<h1 class="main-header">🎬 Movie Graph Analytics</h1>', unsafe_allow_html=True)
    st.markdown("---")

    catalog = load_catalog()
    recommender = load_recommender(catalog)
    by_id = {movie.id: movie for movie in catalog}

    # Sidebar for selection
    st.sidebar.header("⚙️ Configuration")
    selected_ids = st.sidebar.multiselect(
        "Selected Movies",
        options=[movie.id for movie in catalog],
        format_func=lambda movie_id: by_id[movie_id].title,
        help="Movies to place in the graph"
    )
    top_k = st.sidebar.slider(
        "Related Movies",
        min_value=0,
        max_value=20,
        value=config.RELATED_TOP_K,
        help="Movies similar by genre to the last selected movie"
    )

    related_ids = recommender.related_to_selection(selected_ids, top_k=top_k) if top_k else []
    movies = [by_id[movie_id] for movie_id in selected_ids + related_ids]

    session = get_session()
    session.update(movies, selected_ids, related_ids)

    if not session.nodes:
        st.info("Select at least one movie to build the graph.")
        return

    titles = {node.id: node.movie.title for node in session.nodes}
    node_ids = [node.id for node in session.nodes]

    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("🎞️ Movies in Graph")
        for node in session.nodes:
            css_class = "selected-movie" if node.selected else "related-movie"
            st.markdown(
                f'<div class="{css_class}">{node.movie.title} (★ {node.movie.score:.1f})</div>',
                unsafe_allow_html=True
            )
        st.sidebar.info(f"Nodes: {len(session.nodes)}\nEdges: {len(session.edges)}")

    with col2:
        st.subheader("📊 Graph Analysis")
        start_id = st.selectbox(
            "Start",
            options=node_ids,
            format_func=lambda node_id: titles[node_id]
        )
        end_options = [node_id for node_id in node_ids if node_id != start_id] or node_ids
        end_id = st.selectbox(
            "Destination",
            options=end_options,
            format_func=lambda node_id: titles[node_id]
        )

        analysis = analyze_graph(session.nodes, session.edges, start_id=start_id, end_id=end_id)
        if analysis.start_id is None:
            st.warning("These movies share no genres.")
            return

        if analysis.connected:
            st.success("Connected: every movie is reachable")
        else:
            st.warning(f"Disconnected: {analysis.component_count} components")

        with st.expander("Depth-First Search"):
            show_sequence(analysis.dfs, titles, "No result.")
        with st.expander("Breadth-First Search"):
            show_sequence(analysis.bfs, titles, "No result.")
        with st.expander("Shortest Path (Dijkstra)"):
            result = analysis.shortest_path
            if result is not None and result.reachable:
                st.metric("Distance", f"{result.distance:.2f}")
                show_sequence(result.path, titles, "No path found.")
            else:
                st.metric("Distance", "∞")
                st.caption("No path found.")
        with st.expander("Minimum Spanning Tree (Kruskal)"):
            show_sequence(analysis.mst_order, titles, "No tree possible.")


if __name__ == "__main__":
    main()
